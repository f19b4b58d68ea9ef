"""User administration and audit-log routes."""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from edusphere.api.deps import get_actor, get_user_admin
from edusphere.db.engine import get_session
from edusphere.schemas.audit import AuditLogOut
from edusphere.schemas.users import UserCreate, UserOut, UserUpdate
from edusphere.security.audit import DEFAULT_AUDIT_LIMIT
from edusphere.services.user_admin import UserAdminService

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users", response_model=list[UserOut])
async def list_users(
    db: AsyncSession = Depends(get_session),
    users: UserAdminService = Depends(get_user_admin),
) -> list[UserOut]:
    return [UserOut.model_validate(u) for u in await users.list_users(db)]


@router.post("/users", response_model=UserOut)
async def create_user(
    body: UserCreate,
    db: AsyncSession = Depends(get_session),
    users: UserAdminService = Depends(get_user_admin),
    actor: str = Depends(get_actor),
) -> UserOut:
    """Create an account; records USER_CREATED."""
    mutation = await users.create_user(db, body, actor)
    return UserOut.model_validate(mutation.user)


@router.put("/users/{user_id}")
async def update_user(
    user_id: str,
    body: UserUpdate,
    db: AsyncSession = Depends(get_session),
    users: UserAdminService = Depends(get_user_admin),
    actor: str = Depends(get_actor),
) -> dict[str, bool]:
    """Partial update; records exactly one audit entry."""
    await users.update_user(db, user_id, body, actor)
    return {"success": True}


@router.get("/audit-logs", response_model=list[AuditLogOut])
async def audit_logs(
    limit: int = Query(DEFAULT_AUDIT_LIMIT, ge=1, le=500),
    db: AsyncSession = Depends(get_session),
    users: UserAdminService = Depends(get_user_admin),
) -> list[AuditLogOut]:
    """Most recent entries, newest first."""
    return [AuditLogOut.model_validate(e) for e in await users.get_audit_log(db, limit=limit)]
