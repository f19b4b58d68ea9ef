"""Shared fixtures — a throwaway SQLite file per test and fast bcrypt."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from edusphere.config import settings
from edusphere.models import Base, User
from edusphere.security.audit import AuditLogger
from edusphere.security.passwords import hash_password
from edusphere.services.authenticator import Authenticator
from edusphere.services.user_admin import UserAdminService


class AllowAllLimiter:
    """Rate limiter stand-in that never throttles."""

    async def check(self, key: str, limit: int, window: int) -> tuple[bool, int]:
        return True, 0


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Minimum bcrypt work factor keeps hashing-heavy tests quick."""
    monkeypatch.setattr(settings.security, "bcrypt_rounds", 4)


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'school.db'}"


@pytest_asyncio.fixture
async def session_factory(db_url) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(db_url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def audit(session_factory) -> AuditLogger:
    return AuditLogger(session_factory)


@pytest.fixture
def users(audit) -> UserAdminService:
    return UserAdminService(audit)


@pytest.fixture
def authenticator() -> Authenticator:
    return Authenticator(limiter=AllowAllLimiter())


def make_user(
    user_id: str = "u1",
    email: str = "admin@x.test",
    password: str = "secret1",
    role: str = "ADMIN",
    status: str = "ACTIVE",
    name: str = "Test Admin",
) -> User:
    return User(
        id=user_id,
        name=name,
        email=email,
        role=role,
        password_hash=hash_password(password),
        status=status,
    )
