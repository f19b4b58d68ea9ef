"""Student model — enrolment record, optionally linked to a STUDENT login."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from edusphere.models.base import Base
from edusphere.models.enums import FeesStatus


class Student(Base):
    """A pupil enrolled in a grade and section."""

    __tablename__ = "students"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    user_id: Mapped[str | None] = mapped_column(ForeignKey("users.id"))

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    grade: Mapped[str | None] = mapped_column(String(20))
    section: Mapped[str | None] = mapped_column(String(20))

    # Guardian
    guardian_name: Mapped[str | None] = mapped_column(String(200))
    contact: Mapped[str | None] = mapped_column(String(50))

    # Cached summaries shown on the dashboards
    attendance_rate: Mapped[int | None] = mapped_column(Integer)
    fees_status: Mapped[str | None] = mapped_column(String(20), default=FeesStatus.PENDING.value)

    def __repr__(self) -> str:
        return f"<Student id={self.id} grade={self.grade}-{self.section}>"
