"""School-records payloads: students, teachers, assignments, exams, fees, attendance."""

from __future__ import annotations

from pydantic import BaseModel

from edusphere.models.enums import AssignmentStatus, AttendanceStatus, FeesStatus
from edusphere.schemas.base import CamelModel

# ── Students ─────────────────────────────────────────────────────────


class StudentOut(CamelModel):
    id: str
    user_id: str | None = None
    name: str
    grade: str | None = None
    section: str | None = None
    guardian_name: str | None = None
    contact: str | None = None
    attendance_rate: int | None = None
    fees_status: FeesStatus | None = None


class StudentImport(CamelModel):
    """One already-parsed row of a bulk import. Missing id gets a fresh one."""

    id: str | None = None
    name: str
    grade: str | None = None
    section: str | None = None
    guardian_name: str | None = None
    contact: str | None = None
    attendance_rate: int | None = None
    fees_status: FeesStatus | None = None


class BulkImportRequest(BaseModel):
    students: list[StudentImport] | None = None


# ── Teachers ─────────────────────────────────────────────────────────


class TeacherOut(CamelModel):
    id: str
    name: str
    subject: str | None = None
    email: str | None = None
    classes: list[str] = []


class TeacherCreate(CamelModel):
    name: str
    subject: str | None = None
    email: str | None = None
    classes: list[str] = []


# ── Assignments ──────────────────────────────────────────────────────


class AssignmentOut(CamelModel):
    id: str
    class_id: str | None = None
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    subject: str | None = None
    status: AssignmentStatus = AssignmentStatus.OPEN
    attachment_name: str | None = None


class AssignmentCreate(CamelModel):
    class_id: str | None = None
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    subject: str | None = None
    status: AssignmentStatus = AssignmentStatus.OPEN
    attachment_name: str | None = None


# ── Exams & fees ─────────────────────────────────────────────────────


class ExamOut(CamelModel):
    id: str
    student_id: str | None = None
    student_name: str | None = None
    subject: str | None = None
    score: int | None = None
    total: int | None = None
    grade: str | None = None


class FeeOut(CamelModel):
    invoice_id: str
    student_id: str | None = None
    name: str | None = None
    grade: str | None = None
    amount: int = 0
    due_date: str | None = None
    fees_status: FeesStatus = FeesStatus.PENDING


class PayFeeRequest(CamelModel):
    invoice_id: str


# ── Attendance ───────────────────────────────────────────────────────


class AttendanceEntry(CamelModel):
    student_id: str
    status: AttendanceStatus


class AttendanceRequest(BaseModel):
    date: str | None = None
    records: list[AttendanceEntry] | None = None


class AttendanceOut(CamelModel):
    id: str
    date: str
    student_id: str
    status: AttendanceStatus


# ── Dashboard & notifications ────────────────────────────────────────


class StatsOut(BaseModel):
    students: int
    teachers: int
    revenue: int


class EmailNotification(CamelModel):
    recipient_name: str
    subject: str
    message: str
    type: str = "GENERAL"
