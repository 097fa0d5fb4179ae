"""User directory.

Owns user records: registration, profile edits and the admin-only role and
status changes. Callers enforce who may invoke the admin operations (see
``app.auth.guard``); this module only guarantees which fields each operation
can touch.
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError

from app.user.exceptions import InvalidRoleError, UserNotFoundError
from app.user.models import User, UserRole, UserStatus
from app.user.repository import UserRepository
from app.user.schemas import UserProfileUpdate, UserRegister

logger = logging.getLogger(__name__)

# Roles an admin may grant. Demotion to donor is not exposed.
ASSIGNABLE_ROLES = frozenset({UserRole.volunteer, UserRole.admin})


class UserDirectory:
    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, new_user: UserRegister) -> tuple[User, bool]:
        """Register a user, idempotent by email.

        Returns:
            (user, created). When the email already exists the stored record
            is returned unchanged and ``created`` is False.
        """
        existing = self._users.get_by_email(new_user.email)
        if existing is not None:
            return existing, False

        profile = new_user.model_dump(exclude_none=True)
        user = User(**profile, role=UserRole.donor, status=UserStatus.active)
        try:
            user = self._users.save(user)
        except IntegrityError:
            # Lost a race against a concurrent registration of the same email.
            self._users.rollback()
            existing = self._users.get_by_email(new_user.email)
            if existing is None:
                raise
            return existing, False

        logger.info("Registered user %s", user.email, extra={"actor": user.email})
        return user, True

    def get(self, email: str) -> User:
        user = self._users.get_by_email(email)
        if user is None:
            raise UserNotFoundError()
        return user

    def list_by_status(self, status: UserStatus | None = None) -> Sequence[User]:
        return self._users.list(status)

    def count(self) -> int:
        return self._users.count()

    def update_profile(self, email: str, patch: UserProfileUpdate) -> User:
        """Apply the profile fields present in ``patch``; role/status untouched."""
        user = self.get(email)
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in changes.items():
            setattr(user, key, value)
        return self._users.save(user)

    def _get_by_id(self, user_id: uuid.UUID) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def set_role(self, user_id: uuid.UUID, role: UserRole) -> User:
        if role not in ASSIGNABLE_ROLES:
            raise InvalidRoleError(f"Role '{role.value}' cannot be assigned")
        user = self._get_by_id(user_id)
        previous = user.role
        user.role = role
        user = self._users.save(user)
        logger.info(
            "Role of %s changed %s -> %s",
            user.email,
            previous.value,
            role.value,
        )
        return user

    def set_status(self, user_id: uuid.UUID, status: UserStatus) -> User:
        user = self._get_by_id(user_id)
        user.status = status
        user = self._users.save(user)
        logger.info("Status of %s set to %s", user.email, status.value)
        return user
