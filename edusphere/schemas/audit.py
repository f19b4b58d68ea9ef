"""Audit trail payloads."""

from __future__ import annotations

from datetime import datetime

from edusphere.models.enums import AuditAction
from edusphere.schemas.base import CamelModel


class AuditLogOut(CamelModel):
    id: str
    action: AuditAction
    target_user_id: str
    target_user_name: str | None = None
    performed_by: str
    timestamp: datetime
    details: str | None = None
