"""Signed session tokens (JWT, HS256).

Tokens are stateless: there is no revocation list, so a token stays valid
until ``exp`` even if the account is deactivated in the meantime.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from edusphere.config import settings
from edusphere.exceptions import InvalidToken
from edusphere.schemas.auth import SessionClaims


def create_access_token(
    user_id: str,
    email: str,
    role: str,
    now: datetime | None = None,
) -> str:
    """Sign a token binding {id, email, role}, valid for ``token_ttl_hours``."""
    issued = now or datetime.now(UTC)
    expires = issued + timedelta(hours=settings.security.token_ttl_hours)
    payload: dict[str, Any] = {
        "id": user_id,
        "email": email,
        "role": role,
        "iat": int(issued.timestamp()),
        "exp": int(expires.timestamp()),
    }
    return jwt.encode(payload, settings.security.jwt_secret, algorithm=settings.security.jwt_algorithm)


def decode_access_token(token: str) -> SessionClaims:
    """Validate signature and expiry and return the embedded claims.

    Raises:
        InvalidToken: malformed, expired, badly signed, or missing claims.
    """
    try:
        payload = jwt.decode(
            token,
            settings.security.jwt_secret,
            algorithms=[settings.security.jwt_algorithm],
            options={"require": ["exp", "iat"]},
        )
        return SessionClaims(
            id=payload["id"],
            email=payload["email"],
            role=payload["role"],
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
    except (jwt.InvalidTokenError, KeyError, ValueError) as exc:
        raise InvalidToken() from exc
