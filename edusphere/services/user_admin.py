"""User administration — create, update, and list accounts with an audit trail.

Every successful create or update appends exactly one audit entry. When a
single update changes several things, one action kind is chosen in this
order: PASSWORD_RESET, then STATUS_CHANGE, then USER_UPDATED. The details
text still lists every change.

Concurrent updates to the same user are last-write-wins; the "changed from"
text is computed against the row as read at the start of the call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from edusphere.config import settings
from edusphere.exceptions import NotFound, ValidationError
from edusphere.models.audit import AuditLog
from edusphere.models.base import new_id
from edusphere.models.enums import AuditAction, UserStatus
from edusphere.models.user import User
from edusphere.schemas.users import UserCreate, UserUpdate
from edusphere.security.audit import DEFAULT_AUDIT_LIMIT, AuditLogger, AuditResult, audit_logger
from edusphere.security.passwords import hash_password

logger = logging.getLogger(__name__)

PROFILE_UPDATED = "Profile details updated"
PASSWORD_CHANGED = "Password changed"


@dataclass
class UserMutation:
    """A committed user write plus the outcome of its audit append."""

    user: User
    audit: AuditResult


def describe_update(current: User, changes: UserUpdate) -> tuple[AuditAction, str]:
    """Pick the audit action kind and details text for an update."""
    action = AuditAction.USER_UPDATED
    details: list[str] = []

    if changes.password:
        action = AuditAction.PASSWORD_RESET
        details.append(PASSWORD_CHANGED)

    if changes.status is not None and changes.status.value != current.status:
        if action is AuditAction.USER_UPDATED:
            action = AuditAction.STATUS_CHANGE
        details.append(f"Status changed from {current.status} to {changes.status.value}")

    if not details:
        details.append(PROFILE_UPDATED)

    return action, ", ".join(details)


class UserAdminService:
    """Account mutations — AsyncSession passed per call."""

    def __init__(self, audit: AuditLogger | None = None) -> None:
        self._audit = audit or audit_logger

    async def _email_taken(self, db: AsyncSession, email: str, exclude_id: str | None = None) -> bool:
        query = select(User.id).where(User.email == email)
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        result = await db.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def create_user(self, db: AsyncSession, data: UserCreate, actor: str) -> UserMutation:
        """Create an account and record USER_CREATED.

        Raises:
            ValidationError: missing name or email, or email already in use.
        """
        email = (data.email or "").strip()
        if not email:
            raise ValidationError("Email is required")
        if not data.name:
            raise ValidationError("Name is required")
        if await self._email_taken(db, email):
            raise ValidationError(f"Email {email} is already in use")

        user = User(
            id=new_id("u"),
            name=data.name,
            email=email,
            role=data.role.value,
            password_hash=hash_password(data.password or settings.security.default_password),
            avatar_url=data.avatar_url,
            status=(data.status or UserStatus.ACTIVE).value,
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent create for the same email
            await db.rollback()
            raise ValidationError(f"Email {email} is already in use") from exc

        logger.info("User created: id=%s role=%s by=%s", user.id, user.role, actor)
        audit = await self._audit.record(
            AuditAction.USER_CREATED,
            user.id,
            user.name,
            actor,
            f"Role: {user.role}",
        )
        return UserMutation(user=user, audit=audit)

    async def update_user(
        self,
        db: AsyncSession,
        user_id: str,
        changes: UserUpdate,
        actor: str,
    ) -> UserMutation:
        """Apply the supplied fields only and record one audit entry.

        Raises:
            NotFound: no user with ``user_id``; nothing is recorded.
            ValidationError: blank email, or new email already belongs to another user.
        """
        user = await db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")

        action, details = describe_update(user, changes)
        target_name = user.name

        if changes.email is not None:
            email = changes.email.strip()
            if not email:
                raise ValidationError("Email is required")
            if email != user.email:
                if await self._email_taken(db, email, exclude_id=user.id):
                    raise ValidationError(f"Email {email} is already in use")
                user.email = email
        if changes.name is not None:
            user.name = changes.name
        if changes.avatar_url is not None:
            user.avatar_url = changes.avatar_url
        if changes.status is not None:
            user.status = changes.status.value
        if changes.password:
            user.password_hash = hash_password(changes.password)

        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise ValidationError("Email is already in use") from exc

        logger.info("User updated: id=%s action=%s by=%s", user_id, action.value, actor)
        audit = await self._audit.record(action, user_id, target_name, actor, details)
        return UserMutation(user=user, audit=audit)

    async def get_user(self, db: AsyncSession, user_id: str) -> User:
        user = await db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    async def list_users(self, db: AsyncSession) -> list[User]:
        result = await db.execute(select(User).order_by(User.name))
        return list(result.scalars().all())

    async def get_audit_log(self, db: AsyncSession, limit: int = DEFAULT_AUDIT_LIMIT) -> list[AuditLog]:
        return await self._audit.get_audit_log(db, limit=limit)


# Module-level singleton
user_admin = UserAdminService()
