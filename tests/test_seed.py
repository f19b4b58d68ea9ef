"""Tests for startup bootstrap — default admin and demo data."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from edusphere.config import settings
from edusphere.db.seed import DEFAULT_ADMIN_ID, bootstrap, ensure_default_admin, seed_demo_data
from edusphere.models import FeeInvoice, Student, User
from edusphere.security.passwords import hash_password, verify_password


async def _count(db, column) -> int:
    return (await db.execute(select(func.count(column)))).scalar()


class TestDefaultAdmin:
    @pytest.mark.asyncio()
    async def test_created_when_missing(self, db):
        admin = await ensure_default_admin(db)

        assert admin.id == DEFAULT_ADMIN_ID
        assert admin.email == settings.bootstrap.admin_email
        assert admin.role == "ADMIN"
        assert verify_password(settings.bootstrap.admin_password, admin.password_hash)

    @pytest.mark.asyncio()
    async def test_existing_password_is_kept(self, db):
        admin = await ensure_default_admin(db)
        admin.password_hash = hash_password("rotated-pw")
        await db.commit()

        again = await ensure_default_admin(db)

        assert await _count(db, User.id) == 1
        assert verify_password("rotated-pw", again.password_hash)


class TestDemoData:
    @pytest.mark.asyncio()
    async def test_bootstrap_seeds_empty_store(self, db, monkeypatch):
        monkeypatch.setattr(settings.bootstrap, "seed_demo_data", True)

        await bootstrap(db)

        assert await _count(db, User.id) == 4
        assert await _count(db, Student.id) == 3
        assert await _count(db, FeeInvoice.invoice_id) == 2

    @pytest.mark.asyncio()
    async def test_second_bootstrap_adds_nothing(self, db, monkeypatch):
        monkeypatch.setattr(settings.bootstrap, "seed_demo_data", True)
        await bootstrap(db)

        await bootstrap(db)

        assert await _count(db, User.id) == 4
        assert await _count(db, Student.id) == 3

    @pytest.mark.asyncio()
    async def test_skips_populated_store(self, db):
        await ensure_default_admin(db)
        db.add(User(id="u9", name="Other", email="other@x.test", role="TEACHER", password_hash="h"))
        await db.commit()

        assert await seed_demo_data(db) is False
        assert await _count(db, Student.id) == 0

    @pytest.mark.asyncio()
    async def test_disabled(self, db, monkeypatch):
        monkeypatch.setattr(settings.bootstrap, "seed_demo_data", False)

        await bootstrap(db)

        assert await _count(db, User.id) == 1
