"""User domain schemas.

Request and response schemas for user operations.

Security notes:
- UserRegister and UserProfileUpdate carry no role/status fields, so a client
  cannot grant itself privileges; unknown keys are dropped by Pydantic
- role and status change only through the admin endpoints
"""

import uuid

from pydantic import EmailStr, Field
from sqlmodel import SQLModel

from app.core.mixins import UTCDatetime
from app.user.models import UserRole, UserStatus


class UserProfile(SQLModel):
    """Profile fields the user owns."""

    name: str | None = Field(default=None, max_length=100)
    blood_group: str | None = Field(default=None, max_length=5)
    district: str | None = Field(default=None, max_length=100)
    upazila: str | None = Field(default=None, max_length=100)
    avatar: str | None = Field(default=None, max_length=2048)


class UserRegister(UserProfile):
    """Request schema for POST /users."""

    email: EmailStr


class UserProfileUpdate(UserProfile):
    """Request schema for PATCH /users/{email}.

    Only the fields actually sent are applied.
    """


class UserRead(SQLModel):
    """Response schema for a user record."""

    id: uuid.UUID
    email: EmailStr
    name: str
    blood_group: str | None
    district: str | None
    upazila: str | None
    avatar: str | None
    role: UserRole
    status: UserStatus
    created_at: UTCDatetime
    updated_at: UTCDatetime


class UserRegisterResult(SQLModel):
    """Response for POST /users.

    ``created`` is False when the email was already registered; ``user`` is
    then the existing, unchanged record.
    """

    created: bool
    message: str
    user: UserRead


class UserStatusUpdate(SQLModel):
    """Request schema for PATCH /users/status/{id}."""

    status: UserStatus
