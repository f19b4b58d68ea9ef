"""Audit logger — appends one immutable row per user-account mutation.

Each entry is written in its own session and transaction, after the primary
write has committed, so a failed append can never roll the mutation back.

Never raises — failures are logged and reported through ``AuditResult`` so
callers (and tests) can inspect them and move on.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from edusphere.db.engine import async_session_factory
from edusphere.models.audit import AuditLog
from edusphere.models.enums import AuditAction

logger = logging.getLogger(__name__)

DEFAULT_AUDIT_LIMIT = 100


@dataclass
class AuditResult:
    """Outcome of a single append."""

    success: bool = False
    entry_id: str | None = None
    error: str | None = None


def _new_log_id() -> str:
    return f"log-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class AuditLogger:
    """Best-effort writer and reader for the ``audit_logs`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        self._session_factory = session_factory or async_session_factory

    async def record(
        self,
        action: AuditAction,
        target_id: str,
        target_name: str | None,
        performed_by: str,
        details: str,
    ) -> AuditResult:
        """Append an entry with a fresh id and the current UTC timestamp."""
        entry_id = _new_log_id()
        try:
            async with self._session_factory() as db:
                db.add(AuditLog(
                    id=entry_id,
                    action=action.value,
                    target_user_id=target_id,
                    target_user_name=target_name,
                    performed_by=performed_by,
                    timestamp=datetime.now(UTC),
                    details=details,
                ))
                await db.commit()
        except Exception as exc:
            logger.exception(
                "Failed to persist audit entry: %s (target=%s)",
                action.value,
                target_id,
            )
            return AuditResult(success=False, error=str(exc))

        logger.info(
            "Audit %s: target=%s by=%s — %s",
            action.value,
            target_id,
            performed_by,
            details,
        )
        return AuditResult(success=True, entry_id=entry_id)

    async def get_audit_log(self, db: AsyncSession, limit: int = DEFAULT_AUDIT_LIMIT) -> list[AuditLog]:
        """Return the most recent entries, newest first.

        Entries sharing a timestamp are ordered by insertion, latest first.
        """
        result = await db.execute(
            select(AuditLog)
            .order_by(AuditLog.timestamp.desc(), literal_column("audit_logs.rowid").desc())
            .limit(limit)
        )
        return list(result.scalars().all())


# Module-level singleton
audit_logger = AuditLogger()
