"""Initial schema — users, audit trail, and school records.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""
from __future__ import annotations

from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, tuple[str, ...], None] = None
depends_on: Union[str, tuple[str, ...], None] = None


def upgrade() -> None:
    # ── Accounts & audit ───────────────────────────────────────────────

    op.create_table(
        "users",
        sa.Column("id", sa.String(40), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("avatar_url", sa.Text()),
        sa.Column("password_hash", sa.String(100), nullable=False, comment="bcrypt hash"),
        sa.Column("status", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.String(60), nullable=False),
        sa.Column("action", sa.String(40), nullable=False),
        sa.Column("target_user_id", sa.String(40), nullable=False),
        sa.Column("target_user_name", sa.String(200)),
        sa.Column("performed_by", sa.String(255), nullable=False, comment="Actor email or 'System'"),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("details", sa.Text()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_audit_logs_action", "audit_logs", ["action"])
    op.create_index("ix_audit_logs_target_user_id", "audit_logs", ["target_user_id"])
    op.create_index("ix_audit_logs_timestamp", "audit_logs", ["timestamp"])

    # ── School records ─────────────────────────────────────────────────

    op.create_table(
        "students",
        sa.Column("id", sa.String(40), nullable=False),
        sa.Column("user_id", sa.String(40), sa.ForeignKey("users.id")),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("grade", sa.String(20)),
        sa.Column("section", sa.String(20)),
        sa.Column("guardian_name", sa.String(200)),
        sa.Column("contact", sa.String(50)),
        sa.Column("attendance_rate", sa.Integer()),
        sa.Column("fees_status", sa.String(20)),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "teachers",
        sa.Column("id", sa.String(40), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("subject", sa.String(100)),
        sa.Column("email", sa.String(255)),
        sa.Column("classes", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "assignments",
        sa.Column("id", sa.String(40), nullable=False),
        sa.Column("class_id", sa.String(20), comment="e.g. 10-A"),
        sa.Column("title", sa.String(200)),
        sa.Column("description", sa.Text()),
        sa.Column("due_date", sa.String(20), comment="ISO date"),
        sa.Column("subject", sa.String(100)),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("attachment_name", sa.String(255)),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_assignments_class_id", "assignments", ["class_id"])

    op.create_table(
        "exams",
        sa.Column("id", sa.String(40), nullable=False),
        sa.Column("student_id", sa.String(40)),
        sa.Column("student_name", sa.String(200)),
        sa.Column("subject", sa.String(100)),
        sa.Column("score", sa.Integer()),
        sa.Column("total", sa.Integer()),
        sa.Column("grade", sa.String(5)),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_exams_student_id", "exams", ["student_id"])

    op.create_table(
        "fees",
        sa.Column("invoice_id", sa.String(40), nullable=False, comment="e.g. INV-001"),
        sa.Column("student_id", sa.String(40)),
        sa.Column("name", sa.String(200)),
        sa.Column("grade", sa.String(20)),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("due_date", sa.String(20)),
        sa.Column("fees_status", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("invoice_id"),
    )
    op.create_index("ix_fees_student_id", "fees", ["student_id"])

    op.create_table(
        "attendance",
        sa.Column("id", sa.String(80), nullable=False),
        sa.Column("date", sa.String(20), nullable=False),
        sa.Column("student_id", sa.String(40), sa.ForeignKey("students.id"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_attendance_date", "attendance", ["date"])


def downgrade() -> None:
    op.drop_table("attendance")
    op.drop_table("fees")
    op.drop_table("exams")
    op.drop_table("assignments")
    op.drop_table("teachers")
    op.drop_table("students")
    op.drop_table("audit_logs")
    op.drop_table("users")
