"""User payloads. Password hashes never appear in any outbound schema."""

from __future__ import annotations

from edusphere.models.enums import Role, UserStatus
from edusphere.schemas.base import CamelModel


class UserOut(CamelModel):
    id: str
    name: str
    email: str
    role: Role
    avatar_url: str | None = None
    status: UserStatus = UserStatus.ACTIVE


class UserCreate(CamelModel):
    """Admin-created account. Email presence is checked by the service."""

    name: str | None = None
    email: str | None = None
    role: Role
    password: str | None = None
    avatar_url: str | None = None
    status: UserStatus | None = None


class UserUpdate(CamelModel):
    """Partial update — ``None`` means leave the stored value unchanged."""

    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    status: UserStatus | None = None
    password: str | None = None
