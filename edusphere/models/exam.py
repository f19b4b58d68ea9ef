"""ExamResult model — one student's score in one subject."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from edusphere.models.base import Base


class ExamResult(Base):
    __tablename__ = "exams"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    student_id: Mapped[str | None] = mapped_column(String(40), index=True)
    student_name: Mapped[str | None] = mapped_column(String(200))
    subject: Mapped[str | None] = mapped_column(String(100))
    score: Mapped[int | None] = mapped_column(Integer)
    total: Mapped[int | None] = mapped_column(Integer)
    grade: Mapped[str | None] = mapped_column(String(5))

    def __repr__(self) -> str:
        return f"<ExamResult student={self.student_id} {self.score}/{self.total}>"
