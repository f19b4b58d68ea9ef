"""School records — students, teachers, assignments, exams, fees, attendance.

Thin persistence operations behind the role dashboards. None of these touch
user accounts, so none of them write to the audit trail.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from edusphere.exceptions import NotFound, ValidationError
from edusphere.models.assignment import Assignment
from edusphere.models.attendance import AttendanceRecord
from edusphere.models.base import new_id
from edusphere.models.enums import FeesStatus
from edusphere.models.exam import ExamResult
from edusphere.models.fee import FeeInvoice
from edusphere.models.student import Student
from edusphere.models.teacher import Teacher
from edusphere.schemas.school import (
    AssignmentCreate,
    AttendanceEntry,
    EmailNotification,
    StudentImport,
    TeacherCreate,
)

logger = logging.getLogger(__name__)

EMAIL_DOMAIN = "edusphere.school"


def mock_email_address(recipient_name: str) -> str:
    """``"Sarah Wilson"`` → ``"sarah.wilson@edusphere.school"``."""
    local = ".".join(recipient_name.lower().split())
    return f"{local}@{EMAIL_DOMAIN}"


class SchoolService:
    """Stateless record operations — AsyncSession passed per call."""

    # ── Students ─────────────────────────────────────────────────────

    async def list_students(self, db: AsyncSession) -> list[Student]:
        result = await db.execute(select(Student).order_by(Student.name))
        return list(result.scalars().all())

    async def bulk_import_students(self, db: AsyncSession, rows: list[StudentImport] | None) -> int:
        """Insert or replace students by id in one transaction.

        Returns:
            Number of rows written.

        Raises:
            ValidationError: ``rows`` is missing.
        """
        if rows is None:
            raise ValidationError("Invalid data")

        for row in rows:
            values = row.model_dump(exclude={"id"})
            if values.get("fees_status") is not None:
                values["fees_status"] = values["fees_status"].value
            await db.merge(Student(id=row.id or new_id("s"), **values))

        await db.commit()
        logger.info("Imported %d students", len(rows))
        return len(rows)

    # ── Teachers ─────────────────────────────────────────────────────

    async def list_teachers(self, db: AsyncSession) -> list[Teacher]:
        result = await db.execute(select(Teacher).order_by(Teacher.name))
        return list(result.scalars().all())

    async def create_teacher(self, db: AsyncSession, data: TeacherCreate) -> Teacher:
        teacher = Teacher(
            id=new_id("t"),
            name=data.name,
            subject=data.subject,
            email=data.email,
            classes=list(data.classes),
        )
        db.add(teacher)
        await db.commit()
        logger.info("Teacher created: id=%s subject=%s", teacher.id, teacher.subject)
        return teacher

    # ── Assignments ──────────────────────────────────────────────────

    async def list_assignments(self, db: AsyncSession, class_id: str | None = None) -> list[Assignment]:
        query = select(Assignment)
        if class_id is not None:
            query = query.where(Assignment.class_id == class_id)
        result = await db.execute(query.order_by(Assignment.due_date))
        return list(result.scalars().all())

    async def create_assignment(self, db: AsyncSession, data: AssignmentCreate) -> Assignment:
        values = data.model_dump()
        values["status"] = data.status.value
        assignment = Assignment(id=new_id("as"), **values)
        db.add(assignment)
        await db.commit()
        logger.info("Assignment created: id=%s class=%s", assignment.id, assignment.class_id)
        return assignment

    # ── Exams ────────────────────────────────────────────────────────

    async def list_exams(self, db: AsyncSession) -> list[ExamResult]:
        result = await db.execute(select(ExamResult).order_by(ExamResult.student_name))
        return list(result.scalars().all())

    # ── Fees ─────────────────────────────────────────────────────────

    async def list_fees(self, db: AsyncSession) -> list[FeeInvoice]:
        result = await db.execute(select(FeeInvoice).order_by(FeeInvoice.invoice_id))
        return list(result.scalars().all())

    async def pay_fee(self, db: AsyncSession, invoice_id: str) -> FeeInvoice:
        """Mark an invoice PAID. Paying an already-paid invoice is a no-op."""
        invoice = await db.get(FeeInvoice, invoice_id)
        if invoice is None:
            raise NotFound(f"Invoice {invoice_id} not found")
        invoice.fees_status = FeesStatus.PAID.value
        await db.commit()
        logger.info("Invoice %s paid", invoice_id)
        return invoice

    # ── Attendance ───────────────────────────────────────────────────

    async def mark_attendance(
        self,
        db: AsyncSession,
        date: str | None,
        records: list[AttendanceEntry] | None,
    ) -> int:
        """Upsert one row per student for ``date``.

        Raises:
            ValidationError: date or records missing.
        """
        if not date or records is None:
            raise ValidationError("Invalid attendance data")

        for entry in records:
            await db.merge(AttendanceRecord(
                id=AttendanceRecord.make_id(entry.student_id, date),
                date=date,
                student_id=entry.student_id,
                status=entry.status.value,
            ))

        await db.commit()
        logger.info("Attendance marked for %s: %d records", date, len(records))
        return len(records)

    async def list_attendance(self, db: AsyncSession, date: str | None = None) -> list[AttendanceRecord]:
        query = select(AttendanceRecord)
        if date is not None:
            query = query.where(AttendanceRecord.date == date)
        result = await db.execute(query.order_by(AttendanceRecord.date, AttendanceRecord.student_id))
        return list(result.scalars().all())

    # ── Dashboard ────────────────────────────────────────────────────

    async def get_stats(self, db: AsyncSession) -> dict[str, int]:
        """Headline counts for the admin dashboard; revenue counts PAID invoices only."""
        students = (await db.execute(select(func.count(Student.id)))).scalar() or 0
        teachers = (await db.execute(select(func.count(Teacher.id)))).scalar() or 0
        revenue = (
            await db.execute(
                select(func.sum(FeeInvoice.amount)).where(FeeInvoice.fees_status == FeesStatus.PAID.value)
            )
        ).scalar() or 0
        return {"students": students, "teachers": teachers, "revenue": revenue}

    # ── Notifications ────────────────────────────────────────────────

    async def send_email(self, notification: EmailNotification) -> dict[str, Any]:
        """Mock delivery — the message is only written to the log."""
        logger.info(
            "[MOCK EMAIL] type=%s to=%s <%s> subject=%s body=%s",
            notification.type,
            notification.recipient_name,
            mock_email_address(notification.recipient_name),
            notification.subject,
            notification.message,
        )
        return {"success": True, "message": "Email queued for delivery"}


# Module-level singleton
school_service = SchoolService()
