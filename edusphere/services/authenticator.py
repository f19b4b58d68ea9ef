"""Authenticator — login, session-token verification, and actor resolution.

Login failures for an unknown email and for a wrong password raise the same
``InvalidCredentials`` so the response never reveals whether an account
exists. The inactive check runs only after the password matched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from edusphere.config import settings
from edusphere.exceptions import (
    AccountInactive,
    AuthError,
    InvalidCredentials,
    NoToken,
    TooManyAttempts,
)
from edusphere.models.user import User
from edusphere.schemas.auth import SessionClaims
from edusphere.security.passwords import verify_password
from edusphere.security.rate_limiter import RateLimiter, rate_limiter
from edusphere.security.tokens import create_access_token, decode_access_token

logger = logging.getLogger(__name__)

# Actor names recorded when no identity can be read from the request
SYSTEM_ACTOR = "System"
UNKNOWN_ACTOR = "Unknown Admin"
ANONYMOUS_ADMIN = "Admin"


@dataclass
class LoginResult:
    token: str
    user: User


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


class Authenticator:
    """Stateless credential checks — AsyncSession passed per call."""

    def __init__(self, limiter: RateLimiter | None = None) -> None:
        self._limiter = limiter or rate_limiter

    async def login(self, db: AsyncSession, email: str, password: str) -> LoginResult:
        """Verify email/password and issue a session token.

        Raises:
            TooManyAttempts: rate limit for this email exceeded.
            InvalidCredentials: unknown email or wrong password.
            AccountInactive: password matched but the account is disabled.
        """
        key = f"rate:login:{email.strip().lower()}"
        allowed, retry_after = await self._limiter.check(
            key,
            limit=settings.security.login_rate_limit,
            window=settings.security.login_rate_window,
        )
        if not allowed:
            logger.warning("Login rate limit hit for %s", email)
            raise TooManyAttempts(retry_after)

        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()

        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise InvalidCredentials()

        if not user.is_active:
            logger.info("Login refused for inactive account %s", user.id)
            raise AccountInactive()

        token = create_access_token(user.id, user.email, user.role)
        logger.info("User %s logged in (role=%s)", user.id, user.role)
        return LoginResult(token=token, user=user)

    def verify(self, token: str | None) -> SessionClaims:
        """Validate a bearer token.

        Raises:
            NoToken: no token supplied.
            InvalidToken: malformed, expired, or badly signed token.
        """
        if not token:
            raise NoToken()
        return decode_access_token(token)

    def resolve_actor(self, token: str | None) -> str:
        """Best-effort actor identity for audit attribution. Never raises."""
        if not token:
            return SYSTEM_ACTOR
        try:
            claims = self.verify(token)
        except AuthError:
            return UNKNOWN_ACTOR
        return claims.email or ANONYMOUS_ADMIN


# Module-level singleton
authenticator = Authenticator()
