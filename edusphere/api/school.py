"""School-records routes — students, teachers, assignments, exams, fees, attendance."""
# ruff: noqa: B008  — Depends() in function defaults is standard FastAPI

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from edusphere.api.deps import get_school_service
from edusphere.db.engine import get_session
from edusphere.schemas.school import (
    AssignmentCreate,
    AssignmentOut,
    AttendanceOut,
    AttendanceRequest,
    BulkImportRequest,
    EmailNotification,
    ExamOut,
    FeeOut,
    PayFeeRequest,
    StatsOut,
    StudentOut,
    TeacherCreate,
    TeacherOut,
)
from edusphere.services.school import SchoolService

router = APIRouter(prefix="/api", tags=["school"])


# ── Students ─────────────────────────────────────────────────────────


@router.get("/students", response_model=list[StudentOut])
async def list_students(
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> list[StudentOut]:
    return [StudentOut.model_validate(s) for s in await school.list_students(db)]


@router.post("/students/bulk", status_code=status.HTTP_201_CREATED)
async def bulk_import_students(
    body: BulkImportRequest,
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> dict[str, Any]:
    """Import already-parsed rows; rows with an existing id replace it."""
    count = await school.bulk_import_students(db, body.students)
    return {"message": f"Imported {count} students", "count": count}


# ── Teachers ─────────────────────────────────────────────────────────


@router.get("/teachers", response_model=list[TeacherOut])
async def list_teachers(
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> list[TeacherOut]:
    return [TeacherOut.model_validate(t) for t in await school.list_teachers(db)]


@router.post("/teachers", response_model=TeacherOut)
async def create_teacher(
    body: TeacherCreate,
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> TeacherOut:
    return TeacherOut.model_validate(await school.create_teacher(db, body))


# ── Assignments ──────────────────────────────────────────────────────


@router.get("/assignments", response_model=list[AssignmentOut])
async def list_assignments(
    class_id: str | None = Query(None, alias="classId"),
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> list[AssignmentOut]:
    return [AssignmentOut.model_validate(a) for a in await school.list_assignments(db, class_id)]


@router.post("/assignments")
async def create_assignment(
    body: AssignmentCreate,
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> dict[str, Any]:
    assignment = await school.create_assignment(db, body)
    return {"success": True, "id": assignment.id}


# ── Exams & fees ─────────────────────────────────────────────────────


@router.get("/exams", response_model=list[ExamOut])
async def list_exams(
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> list[ExamOut]:
    return [ExamOut.model_validate(e) for e in await school.list_exams(db)]


@router.get("/fees", response_model=list[FeeOut])
async def list_fees(
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> list[FeeOut]:
    return [FeeOut.model_validate(f) for f in await school.list_fees(db)]


@router.post("/fees/pay")
async def pay_fee(
    body: PayFeeRequest,
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> dict[str, bool]:
    await school.pay_fee(db, body.invoice_id)
    return {"success": True}


# ── Attendance ───────────────────────────────────────────────────────


@router.get("/attendance", response_model=list[AttendanceOut])
async def list_attendance(
    date: str | None = Query(None),
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> list[AttendanceOut]:
    return [AttendanceOut.model_validate(r) for r in await school.list_attendance(db, date)]


@router.post("/attendance")
async def mark_attendance(
    body: AttendanceRequest,
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> dict[str, Any]:
    count = await school.mark_attendance(db, body.date, body.records)
    return {"success": True, "count": count}


# ── Dashboard & notifications ────────────────────────────────────────


@router.get("/stats", response_model=StatsOut)
async def stats(
    db: AsyncSession = Depends(get_session),
    school: SchoolService = Depends(get_school_service),
) -> StatsOut:
    return StatsOut(**await school.get_stats(db))


@router.post("/notifications/email")
async def send_email(
    body: EmailNotification,
    school: SchoolService = Depends(get_school_service),
) -> dict[str, Any]:
    return await school.send_email(body)
