"""FeeInvoice model — tuition invoice keyed by its human-facing number."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from edusphere.models.base import Base
from edusphere.models.enums import FeesStatus


class FeeInvoice(Base):
    __tablename__ = "fees"

    invoice_id: Mapped[str] = mapped_column(String(40), primary_key=True, comment="e.g. INV-001")
    student_id: Mapped[str | None] = mapped_column(String(40), index=True)
    name: Mapped[str | None] = mapped_column(String(200))
    grade: Mapped[str | None] = mapped_column(String(20))
    amount: Mapped[int] = mapped_column(Integer, default=0)
    due_date: Mapped[str | None] = mapped_column(String(20))
    fees_status: Mapped[str] = mapped_column(String(20), default=FeesStatus.PENDING.value)

    def __repr__(self) -> str:
        return f"<FeeInvoice {self.invoice_id} status={self.fees_status}>"
