"""User domain models.

SQLModel table definition for User plus the closed role/status enumerations.
"""

import uuid
from enum import Enum

from pydantic import EmailStr
from sqlmodel import Field, SQLModel

from app.core.mixins import TimestampMixin


class UserRole(str, Enum):
    """User role.

    Roles form a strict hierarchy: admin ⊇ volunteer ⊇ donor.
    """

    donor = "donor"
    volunteer = "volunteer"
    admin = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_RANK[self]

    def satisfies(self, allowed: "set[UserRole] | frozenset[UserRole]") -> bool:
        """Whether this role passes a gate that permits ``allowed``.

        A role passes when it ranks at or above any allowed role, so admin
        passes every volunteer gate but volunteer never passes an admin gate.
        """
        return any(self.rank >= role.rank for role in allowed)


_ROLE_RANK = {UserRole.donor: 0, UserRole.volunteer: 1, UserRole.admin: 2}


class UserStatus(str, Enum):
    """User account status.

    - active: may create donation requests
    - blocked: set by an admin; request creation is refused
    """

    active = "active"
    blocked = "blocked"


class User(TimestampMixin, SQLModel, table=True):
    """User database model. ``email`` is the natural key."""

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: EmailStr = Field(index=True, unique=True, max_length=255)
    name: str = Field(default="", max_length=100)
    blood_group: str | None = Field(default=None, max_length=5)
    district: str | None = Field(default=None, max_length=100)
    upazila: str | None = Field(default=None, max_length=100)
    avatar: str | None = Field(default=None, max_length=2048)
    role: UserRole = Field(default=UserRole.donor, max_length=20)
    status: UserStatus = Field(default=UserStatus.active, max_length=20)

    @property
    def is_blocked(self) -> bool:
        return self.status == UserStatus.blocked
