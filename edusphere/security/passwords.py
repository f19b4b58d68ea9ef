"""bcrypt password hashing.

bcrypt only considers the first 72 bytes of a password; longer input is
truncated explicitly so hashing and verification agree on what was hashed.
"""

from __future__ import annotations

import logging

import bcrypt

from edusphere.config import settings

logger = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72


def _to_bytes(password: str) -> bytes:
    raw = password.encode("utf-8")
    if len(raw) > _BCRYPT_MAX_BYTES:
        logger.warning("Password exceeds %d bytes, truncating", _BCRYPT_MAX_BYTES)
        raw = raw[:_BCRYPT_MAX_BYTES]
    return raw


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash using the configured work factor."""
    salt = bcrypt.gensalt(rounds=settings.security.bcrypt_rounds)
    return bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of ``password`` against a stored bcrypt hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(_to_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        logger.error("Stored password hash is not a valid bcrypt hash")
        return False
