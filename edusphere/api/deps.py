"""FastAPI dependencies — services and the per-request session context.

The caller's identity is read from the ``Authorization`` header on each
request and passed down explicitly; nothing about the session is kept in
module state.
"""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

from fastapi import Depends, Header

from edusphere.schemas.auth import SessionClaims
from edusphere.services.authenticator import Authenticator, authenticator, bearer_token
from edusphere.services.school import SchoolService, school_service
from edusphere.services.user_admin import UserAdminService, user_admin


def get_authenticator() -> Authenticator:
    return authenticator


def get_user_admin() -> UserAdminService:
    return user_admin


def get_school_service() -> SchoolService:
    return school_service


def get_token(authorization: str | None = Header(default=None)) -> str | None:
    """Bearer token from the request, or None."""
    return bearer_token(authorization)


def get_claims(
    token: str | None = Depends(get_token),
    auth: Authenticator = Depends(get_authenticator),
) -> SessionClaims:
    """Require a valid session token; raises NoToken / InvalidToken (401)."""
    return auth.verify(token)


def get_actor(
    token: str | None = Depends(get_token),
    auth: Authenticator = Depends(get_authenticator),
) -> str:
    """Actor identity for audit attribution. Never fails the request."""
    return auth.resolve_actor(token)
