"""Domain enums used across SQLAlchemy models and Pydantic schemas.

All enums use str mixin for JSON serialization; columns store the ``.value``.
"""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Dashboard role of a user account."""

    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"
    PARENT = "PARENT"


class UserStatus(str, Enum):
    """INACTIVE accounts cannot log in; records are never deleted."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class AuditAction(str, Enum):
    """Kind of change recorded against a user account."""

    USER_CREATED = "USER_CREATED"
    STATUS_CHANGE = "STATUS_CHANGE"
    PASSWORD_RESET = "PASSWORD_RESET"
    USER_UPDATED = "USER_UPDATED"


class FeesStatus(str, Enum):
    PAID = "PAID"
    PENDING = "PENDING"
    OVERDUE = "OVERDUE"


class AssignmentStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
