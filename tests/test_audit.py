"""Tests for the audit logger — append isolation and read ordering."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from edusphere.models import AuditLog
from edusphere.models.enums import AuditAction, Role
from edusphere.schemas.audit import AuditLogOut
from edusphere.schemas.users import UserCreate
from edusphere.security.audit import AuditLogger


class TestRecord:
    @pytest.mark.asyncio()
    async def test_success_returns_entry_id(self, audit, db):
        result = await audit.record(AuditAction.USER_CREATED, "u9", "Nine", "System", "Role: ADMIN")

        assert result.success is True
        assert result.entry_id.startswith("log-")
        entries = await audit.get_audit_log(db)
        assert [e.id for e in entries] == [result.entry_id]

    @pytest.mark.asyncio()
    async def test_failure_is_reported_not_raised(self):
        def _broken_factory():
            raise RuntimeError("disk full")

        result = await AuditLogger(_broken_factory).record(
            AuditAction.USER_UPDATED, "u1", "A", "System", "Profile details updated"
        )

        assert result.success is False
        assert result.entry_id is None
        assert result.error == "disk full"


class TestGetAuditLog:
    @pytest.mark.asyncio()
    async def test_limit_and_newest_first(self, db, users):
        for i in range(101):
            await users.create_user(
                db,
                UserCreate(name=f"User {i:03d}", email=f"user{i}@x.test", role=Role.STUDENT),
                "System",
            )

        entries = await users.get_audit_log(db, limit=100)

        assert len(entries) == 100
        assert entries[0].target_user_name == "User 100"
        assert entries[-1].target_user_name == "User 001"
        timestamps = [e.timestamp for e in entries]
        assert timestamps == sorted(timestamps, reverse=True)

    @pytest.mark.asyncio()
    async def test_wire_shape(self, audit, db):
        await audit.record(AuditAction.STATUS_CHANGE, "u1", "A", "admin@x.test", "Status changed from ACTIVE to INACTIVE")

        (entry,) = await audit.get_audit_log(db)
        payload = AuditLogOut.model_validate(entry).model_dump(by_alias=True, mode="json")

        assert payload["action"] == "STATUS_CHANGE"
        assert payload["targetUserId"] == "u1"
        assert payload["targetUserName"] == "A"
        assert payload["performedBy"] == "admin@x.test"
        assert payload["timestamp"].endswith(("Z", "+00:00"))

    @pytest.mark.asyncio()
    async def test_timestamp_read_back_as_utc(self, audit, db):
        await audit.record(AuditAction.USER_UPDATED, "u1", "A", "System", "Profile details updated")

        (entry,) = await audit.get_audit_log(db)

        assert entry.timestamp.tzinfo is not None
        assert entry.timestamp.utcoffset() == timedelta(0)

    @pytest.mark.asyncio()
    async def test_offset_timestamps_stored_as_utc(self, db):
        local = datetime(2024, 1, 10, 9, 30, tzinfo=timezone(timedelta(hours=2)))
        db.add(_entry("log-1", local))
        await db.commit()
        db.expunge_all()

        stored = await db.get(AuditLog, "log-1")

        assert stored.timestamp == datetime(2024, 1, 10, 7, 30, tzinfo=UTC)
        assert stored.timestamp.tzinfo is not None

    @pytest.mark.asyncio()
    async def test_same_timestamp_latest_insert_first(self, db):
        moment = datetime(2024, 1, 10, 7, 30, tzinfo=UTC)
        for entry_id in ("log-b", "log-a", "log-c"):
            db.add(_entry(entry_id, moment))
            await db.commit()

        entries = await AuditLogger().get_audit_log(db)

        assert [e.id for e in entries] == ["log-c", "log-a", "log-b"]


def _entry(entry_id: str, timestamp: datetime) -> AuditLog:
    return AuditLog(
        id=entry_id,
        action=AuditAction.USER_UPDATED.value,
        target_user_id="u1",
        target_user_name="A",
        performed_by="System",
        timestamp=timestamp,
        details="Profile details updated",
    )
