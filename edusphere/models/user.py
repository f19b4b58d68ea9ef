"""User model — the credential store behind login and user administration."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from edusphere.models.base import Base
from edusphere.models.enums import UserStatus


class User(Base):
    """An account that can sign in to one of the role dashboards."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)

    # Profile
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(Text)

    # Credentials
    password_hash: Mapped[str] = mapped_column(String(100), nullable=False, comment="bcrypt hash")
    status: Mapped[str] = mapped_column(String(20), default=UserStatus.ACTIVE.value, nullable=False)

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE.value

    def __repr__(self) -> str:
        return f"<User id={self.id} role={self.role} status={self.status}>"
