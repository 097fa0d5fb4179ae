"""Tests for app/auth/guard.py - role hierarchy and guard pipeline."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from sqlmodel import Session

from app.auth.exceptions import (
    NotSelfError,
    RoleRequiredError,
    UnregisteredUserError,
    UserBlockedError,
)
from app.auth.guard import AuthorizationGuard
from app.auth.service import Identity
from app.user.exceptions import UserNotFoundError
from app.user.models import UserRole, UserStatus


class TestRoleHierarchy:
    def test_admin_passes_volunteer_gate(self):
        assert UserRole.admin.satisfies({UserRole.volunteer})

    def test_volunteer_fails_admin_gate(self):
        assert not UserRole.volunteer.satisfies({UserRole.admin})

    def test_donor_fails_volunteer_gate(self):
        assert not UserRole.donor.satisfies({UserRole.volunteer})

    @given(role=st.sampled_from(list(UserRole)))
    def test_every_role_passes_donor_gate(self, role):
        assert role.satisfies({UserRole.donor})

    @given(
        role=st.sampled_from(list(UserRole)),
        allowed=st.sets(st.sampled_from(list(UserRole)), min_size=1),
    )
    def test_satisfies_matches_rank_order(self, role, allowed):
        """Property: a role passes iff it ranks at or above the lowest allowed."""
        lowest = min(r.rank for r in allowed)
        assert role.satisfies(allowed) == (role.rank >= lowest)


def test_resolve_role_reads_current_record(guard: AuthorizationGuard, volunteer):
    role, status = guard.resolve_role(Identity(email=volunteer.email))

    assert role == UserRole.volunteer
    assert status == UserStatus.active


def test_resolve_role_unknown_identity(guard: AuthorizationGuard):
    with pytest.raises(UserNotFoundError):
        guard.resolve_role(Identity(email="ghost@x.com"))


def test_require_role_admin_only_rejects_volunteer(guard, volunteer):
    with pytest.raises(RoleRequiredError) as exc_info:
        guard.require_role(Identity(email=volunteer.email), {UserRole.admin})

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "admin privileges required"


def test_require_role_volunteer_gate_admits_admin(guard, admin):
    identity = Identity(email=admin.email)

    assert guard.require_role(identity, {UserRole.volunteer}) is identity


def test_require_role_unknown_identity_is_forbidden(guard):
    with pytest.raises(RoleRequiredError):
        guard.require_role(Identity(email="ghost@x.com"), {UserRole.volunteer})


def test_role_change_applies_on_next_call(
    guard: AuthorizationGuard, session: Session, admin
):
    """Roles are re-read on every check; nothing is cached."""
    identity = Identity(email=admin.email)
    guard.require_role(identity, {UserRole.admin})

    admin.role = UserRole.volunteer
    session.add(admin)
    session.commit()

    with pytest.raises(RoleRequiredError):
        guard.require_role(identity, {UserRole.admin})


def test_require_self(guard, donor):
    guard.require_self(Identity(email=donor.email), donor.email)

    with pytest.raises(NotSelfError):
        guard.require_self(Identity(email=donor.email), "someone@x.com")


def test_require_active_rejects_blocked(guard, blocked_user):
    with pytest.raises(UserBlockedError) as exc_info:
        guard.require_active(Identity(email=blocked_user.email))

    assert exc_info.value.message == "blocked user"


def test_require_active_rejects_unregistered(guard):
    with pytest.raises(UnregisteredUserError):
        guard.require_active(Identity(email="ghost@x.com"))


def test_require_active_returns_user(guard, donor):
    assert guard.require_active(Identity(email=donor.email)).id == donor.id


def test_block_applies_on_next_call(guard: AuthorizationGuard, session: Session, donor):
    identity = Identity(email=donor.email)
    guard.require_active(identity)

    donor.status = UserStatus.blocked
    session.add(donor)
    session.commit()

    with pytest.raises(UserBlockedError):
        guard.require_active(identity)


class TestEnforce:
    def test_runs_checks_in_order(self, guard):
        calls = []
        identity = Identity(email="a@x.com")

        result = guard.enforce(
            identity, lambda i: calls.append("first"), lambda i: calls.append("second")
        )

        assert result is identity
        assert calls == ["first", "second"]

    def test_first_failure_short_circuits(self, guard, donor):
        later = []
        identity = Identity(email=donor.email)

        with pytest.raises(NotSelfError):
            guard.enforce(
                identity,
                guard.self_check("other@x.com"),
                lambda i: later.append(i),
            )

        assert later == []

    def test_composed_checks(self, guard, volunteer):
        identity = Identity(email=volunteer.email)

        guard.enforce(
            identity,
            guard.active_check(),
            guard.role_check({UserRole.volunteer}),
            guard.self_check(volunteer.email),
        )

        with pytest.raises(RoleRequiredError):
            guard.enforce(
                identity, guard.active_check(), guard.role_check({UserRole.admin})
            )
