"""Startup bootstrap — default admin account and demo school data.

The default admin is created only when missing; an existing admin keeps its
password. Demo data is inserted only into an otherwise empty store.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from edusphere.config import settings
from edusphere.models import (
    Assignment,
    ExamResult,
    FeeInvoice,
    Role,
    Student,
    Teacher,
    User,
    UserStatus,
)
from edusphere.security.passwords import hash_password

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_ID = "u0"
_AVATAR = "https://api.dicebear.com/7.x/avataaars/svg?seed={}"


async def ensure_default_admin(db: AsyncSession) -> User:
    """Return the bootstrap admin, creating it if it does not exist."""
    email = settings.bootstrap.admin_email
    result = await db.execute(select(User).where(User.email == email))
    admin = result.scalar_one_or_none()
    if admin is not None:
        return admin

    admin = User(
        id=DEFAULT_ADMIN_ID,
        name=settings.bootstrap.admin_name,
        email=email,
        role=Role.ADMIN.value,
        password_hash=hash_password(settings.bootstrap.admin_password),
        avatar_url=_AVATAR.format("Admin"),
        status=UserStatus.ACTIVE.value,
    )
    db.add(admin)
    await db.commit()
    logger.info("Admin account created: %s", email)
    return admin


async def seed_demo_data(db: AsyncSession) -> bool:
    """Insert demo users and school records when only the admin exists.

    Returns:
        True if data was seeded.
    """
    user_count = (await db.execute(select(func.count(User.id)))).scalar() or 0
    if user_count > 1:
        logger.info("Database already populated (%d users), skipping seed", user_count)
        return False

    logger.info("Seeding initial data...")
    password = hash_password(settings.bootstrap.admin_password)

    db.add_all([
        User(id="u2", name="Mr. Anderson", email="anderson@school.com", role=Role.TEACHER.value,
             password_hash=password, avatar_url=_AVATAR.format("Anderson")),
        User(id="u3", name="Emma Thompson", email="emma@student.com", role=Role.STUDENT.value,
             password_hash=password, avatar_url=_AVATAR.format("Emma")),
        User(id="u4", name="Sarah Wilson", email="sarah@parent.com", role=Role.PARENT.value,
             password_hash=password, avatar_url=_AVATAR.format("Sarah")),
    ])
    await db.flush()

    db.add_all([
        Student(id="s1", user_id="u3", name="Emma Thompson", grade="10", section="A",
                guardian_name="John Thompson", contact="+1234567890", attendance_rate=95, fees_status="PAID"),
        Student(id="s2", name="Liam Wilson", grade="10", section="A",
                guardian_name="Sarah Wilson", contact="+1234567891", attendance_rate=88, fees_status="PENDING"),
        Student(id="s3", name="Olivia Martinez", grade="10", section="B",
                guardian_name="Carlos Martinez", contact="+1234567892", attendance_rate=98, fees_status="PAID"),
        Teacher(id="t1", name="Mr. Anderson", subject="Mathematics", email="anderson@school.com",
                classes=["10-A", "9-B"]),
        Teacher(id="t2", name="Ms. Roberts", subject="Science", email="roberts@school.com",
                classes=["10-B", "8-A"]),
        Assignment(id="as1", class_id="10-A", title="Algebra Functions",
                   description="Complete Chapter 4 Exercises.", due_date="2023-10-25",
                   subject="Mathematics", status="OPEN", attachment_name="Algebra.pdf"),
        Assignment(id="as2", class_id="10-A", title="Geometry Proofs",
                   description="Write proofs for congruency.", due_date="2023-11-01",
                   subject="Mathematics", status="OPEN"),
        ExamResult(id="ex1", student_id="s1", student_name="Emma Thompson", subject="Math",
                   score=95, total=100, grade="A"),
        ExamResult(id="ex2", student_id="s2", student_name="Liam Wilson", subject="Math",
                   score=78, total=100, grade="B"),
        ExamResult(id="ex3", student_id="s3", student_name="Olivia Martinez", subject="Math",
                   score=88, total=100, grade="A-"),
        FeeInvoice(invoice_id="INV-001", student_id="s1", name="Emma Thompson", grade="10",
                   amount=1250, due_date="2023-11-01", fees_status="PAID"),
        FeeInvoice(invoice_id="INV-002", student_id="s2", name="Liam Wilson", grade="10",
                   amount=1250, due_date="2023-11-01", fees_status="PENDING"),
    ])
    await db.commit()
    logger.info("Database seeded successfully")
    return True


async def bootstrap(db: AsyncSession) -> None:
    """Run every startup data step in order."""
    await ensure_default_admin(db)
    if settings.bootstrap.seed_demo_data:
        await seed_demo_data(db)
