"""AttendanceRecord model — one row per student per school day.

The id is derived from ``<student_id>-<date>`` so re-marking a day replaces
the earlier row instead of adding a second one.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from edusphere.models.base import Base


class AttendanceRecord(Base):
    __tablename__ = "attendance"

    id: Mapped[str] = mapped_column(String(80), primary_key=True)
    date: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    student_id: Mapped[str] = mapped_column(ForeignKey("students.id"), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)

    @staticmethod
    def make_id(student_id: str, date: str) -> str:
        return f"{student_id}-{date}"

    def __repr__(self) -> str:
        return f"<AttendanceRecord {self.student_id} {self.date} {self.status}>"
