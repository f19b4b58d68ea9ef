"""Assignment model — homework posted to a class."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from edusphere.models.base import Base
from edusphere.models.enums import AssignmentStatus


class Assignment(Base):
    __tablename__ = "assignments"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    class_id: Mapped[str | None] = mapped_column(String(20), index=True, comment="e.g. 10-A")
    title: Mapped[str | None] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text)
    due_date: Mapped[str | None] = mapped_column(String(20), comment="ISO date")
    subject: Mapped[str | None] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(String(20), default=AssignmentStatus.OPEN.value)
    attachment_name: Mapped[str | None] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"<Assignment class={self.class_id} title={self.title}>"
