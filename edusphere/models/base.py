"""SQLAlchemy declarative base, column types and id helpers.

Ids are opaque strings with a short type prefix (``u-``, ``s-``, ``log-``)
so they stay readable in the audit trail and in API payloads.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware UTC datetime on top of SQLite's offset-less storage.

    Values are stored as UTC and come back with ``tzinfo=UTC``.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


def new_id(prefix: str) -> str:
    """Return a fresh unique id such as ``u-3f9c0a1b2d4e``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
