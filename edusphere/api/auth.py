"""Authentication routes — login and current-session lookup."""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from edusphere.api.deps import get_authenticator, get_claims, get_user_admin
from edusphere.db.engine import get_session
from edusphere.schemas.auth import LoginRequest, LoginResponse, SessionClaims
from edusphere.schemas.users import UserOut
from edusphere.services.authenticator import Authenticator
from edusphere.services.user_admin import UserAdminService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_session),
    auth: Authenticator = Depends(get_authenticator),
) -> LoginResponse:
    """Exchange email/password for a 24-hour session token."""
    result = await auth.login(db, body.email, body.password)
    return LoginResponse(token=result.token, user=UserOut.model_validate(result.user))


@router.get("/me", response_model=UserOut)
async def me(
    claims: SessionClaims = Depends(get_claims),
    db: AsyncSession = Depends(get_session),
    users: UserAdminService = Depends(get_user_admin),
) -> UserOut:
    """Current user as stored now (the token itself may carry older claims)."""
    user = await users.get_user(db, claims.id)
    return UserOut.model_validate(user)
