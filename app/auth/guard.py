"""Authorization guard.

Decides whether an authenticated identity may perform an action. Every check
reads the caller's current user record, so a demotion or block applies to the
very next call of an existing session.

Checks compose explicitly::

    guard.enforce(
        identity,
        guard.active_check(),
        guard.role_check({UserRole.volunteer}),
    )

runs the checks in order and stops at the first failure.
"""

from collections.abc import Callable, Iterable

from app.auth.exceptions import (
    NotSelfError,
    RoleRequiredError,
    UnregisteredUserError,
    UserBlockedError,
)
from app.auth.service import Identity
from app.user.exceptions import UserNotFoundError
from app.user.models import User, UserRole, UserStatus
from app.user.repository import UserRepository

Check = Callable[[Identity], None]


def _describe(allowed: Iterable[UserRole]) -> str:
    lowest = min(allowed, key=lambda role: role.rank)
    if lowest is UserRole.admin:
        return "admin privileges required"
    return f"{lowest.value} or above required"


class AuthorizationGuard:
    def __init__(self, users: UserRepository):
        self._users = users

    def _load(self, identity: Identity) -> User | None:
        return self._users.get_by_email(identity.email)

    def resolve_role(self, identity: Identity) -> tuple[UserRole, UserStatus]:
        """Look up the identity's current role and status.

        Raises:
            UserNotFoundError: If the identity has no user record.
        """
        user = self._load(identity)
        if user is None:
            raise UserNotFoundError()
        return user.role, user.status

    def has_role(self, identity: Identity, allowed: set[UserRole]) -> bool:
        """Non-raising form of require_role."""
        user = self._load(identity)
        return user is not None and user.role.satisfies(allowed)

    def require_role(self, identity: Identity, allowed: set[UserRole]) -> Identity:
        """Pass when the caller's role ranks at or above one of ``allowed``.

        Raises:
            RoleRequiredError: If the role is too low or the identity has no
                user record.
        """
        if not self.has_role(identity, allowed):
            raise RoleRequiredError(_describe(allowed))
        return identity

    def require_self(self, identity: Identity, target_email: str) -> None:
        if identity.email != target_email:
            raise NotSelfError()

    def require_active(self, identity: Identity) -> User:
        """Return the caller's record, refusing blocked or unknown accounts."""
        user = self._load(identity)
        if user is None:
            raise UnregisteredUserError()
        if user.is_blocked:
            raise UserBlockedError()
        return user

    def role_check(self, allowed: set[UserRole]) -> Check:
        return lambda identity: self.require_role(identity, allowed)

    def self_check(self, target_email: str) -> Check:
        return lambda identity: self.require_self(identity, target_email)

    def active_check(self) -> Check:
        return lambda identity: self.require_active(identity)

    def enforce(self, identity: Identity, *checks: Check) -> Identity:
        """Run ``checks`` in order; the first failure propagates."""
        for check in checks:
            check(identity)
        return identity
