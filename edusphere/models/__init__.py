"""SQLAlchemy ORM models for EduSphere.

Import all models here so Alembic and Base.metadata.create_all() discover them.
"""

from __future__ import annotations

from edusphere.models.assignment import Assignment
from edusphere.models.attendance import AttendanceRecord
from edusphere.models.audit import AuditLog
from edusphere.models.base import Base, new_id
from edusphere.models.enums import (
    AssignmentStatus,
    AttendanceStatus,
    AuditAction,
    FeesStatus,
    Role,
    UserStatus,
)
from edusphere.models.exam import ExamResult
from edusphere.models.fee import FeeInvoice
from edusphere.models.student import Student
from edusphere.models.teacher import Teacher
from edusphere.models.user import User

__all__ = [
    # Base
    "Base",
    "new_id",
    # Models
    "User",
    "AuditLog",
    "Student",
    "Teacher",
    "Assignment",
    "ExamResult",
    "FeeInvoice",
    "AttendanceRecord",
    # Enums
    "Role",
    "UserStatus",
    "AuditAction",
    "FeesStatus",
    "AssignmentStatus",
    "AttendanceStatus",
]
