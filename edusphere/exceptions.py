"""Domain exceptions.

Every exception carries the HTTP status it maps to; the API layer renders
them as ``{"error": message}`` without further interpretation.
"""

from __future__ import annotations


class EduSphereError(Exception):
    """Base exception for all EduSphere errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# ── Authentication ───────────────────────────────────────────────────


class AuthError(EduSphereError):
    """Base class for credential and session failures."""

    status_code = 401


class InvalidCredentials(AuthError):
    """Unknown email or wrong password. Deliberately one message for both."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class AccountInactive(AuthError):
    """Valid credentials for a disabled account."""

    status_code = 403

    def __init__(self) -> None:
        super().__init__("Account is inactive")


class NoToken(AuthError):
    def __init__(self) -> None:
        super().__init__("No token provided")


class InvalidToken(AuthError):
    def __init__(self) -> None:
        super().__init__("Invalid token")


class TooManyAttempts(AuthError):
    """Login attempts exceeded the rate limit."""

    status_code = 429

    def __init__(self, retry_after: int) -> None:
        self.retry_after = retry_after
        super().__init__(f"Too many login attempts, retry in {retry_after}s")


# ── Records ──────────────────────────────────────────────────────────


class ValidationError(EduSphereError):
    """Missing or conflicting field on a create/update."""

    status_code = 400


class NotFound(EduSphereError):
    """Requested record does not exist."""

    status_code = 404
