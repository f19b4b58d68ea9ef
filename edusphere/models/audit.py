"""AuditLog model — immutable trail of changes to user accounts.

This table is append-only — no updates or deletes. Target columns are plain
strings, not foreign keys: the trail must outlive any change to users.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from edusphere.models.base import Base, UTCDateTime


class AuditLog(Base):
    """Immutable audit trail entry."""

    __tablename__ = "audit_logs"

    id: Mapped[str] = mapped_column(String(60), primary_key=True)
    action: Mapped[str] = mapped_column(String(40), nullable=False, index=True)

    # Target
    target_user_id: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    target_user_name: Mapped[str | None] = mapped_column(String(200))

    performed_by: Mapped[str] = mapped_column(String(255), nullable=False, comment="Actor email or 'System'")
    timestamp: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False, index=True)
    details: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<AuditLog action={self.action} target={self.target_user_id}>"
