"""Login and session-token payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from edusphere.models.enums import Role
from edusphere.schemas.users import UserOut


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    token: str
    user: UserOut


class SessionClaims(BaseModel):
    """Identity embedded in a session token at issuance.

    Not refreshed on later profile edits: a token keeps the role and email
    the user had when it was signed until it expires.
    """

    id: str
    email: str
    role: Role
    issued_at: datetime
    expires_at: datetime

    model_config = {"frozen": True}
