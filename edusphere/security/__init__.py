"""Security module — password hashing, session tokens, rate limiting, audit."""

from edusphere.security.audit import audit_logger
from edusphere.security.rate_limiter import rate_limiter

__all__ = ["audit_logger", "rate_limiter"]
