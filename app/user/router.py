"""User domain router.

Registration, self-service profile routes and the admin moderation routes.
The fixed ``/admin``, ``/volunteer`` and ``/status`` segments are two path
levels deep, so they never collide with ``/{email}``.
"""

import uuid

from fastapi import APIRouter, Depends
from pydantic import EmailStr

from app.auth.dependencies import GuardDep, IdentityDep, require_admin
from app.core.constants import CommonResponses, Routes
from app.user.dependencies import UserDirectoryDep
from app.user.models import UserRole, UserStatus
from app.user.schemas import (
    UserProfileUpdate,
    UserRead,
    UserRegister,
    UserRegisterResult,
    UserStatusUpdate,
)

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.FORBIDDEN},
)

admin_only = [Depends(require_admin)]


@router.post("", response_model=UserRegisterResult)
async def register_user(new_user: UserRegister, directory: UserDirectoryDep):
    """Register a user. Re-registering an email returns the existing record.

    Role and status are always donor/active for new accounts.
    """
    user, created = directory.register(new_user)
    message = "user registered" if created else "user already exists"
    return UserRegisterResult(
        created=created, message=message, user=UserRead.model_validate(user)
    )


@router.get("", response_model=list[UserRead], dependencies=admin_only)
async def list_users(directory: UserDirectoryDep, status: UserStatus | None = None):
    """List users, optionally filtered by status. Admin only."""
    return directory.list_by_status(status)


@router.patch(
    "/admin/{user_id}",
    response_model=UserRead,
    dependencies=admin_only,
    responses={**CommonResponses.NOT_FOUND},
)
async def make_admin(user_id: uuid.UUID, directory: UserDirectoryDep):
    """Promote a user to admin. Admin only."""
    return directory.set_role(user_id, UserRole.admin)


@router.patch(
    "/volunteer/{user_id}",
    response_model=UserRead,
    dependencies=admin_only,
    responses={**CommonResponses.NOT_FOUND},
)
async def make_volunteer(user_id: uuid.UUID, directory: UserDirectoryDep):
    """Set a user's role to volunteer. Admin only."""
    return directory.set_role(user_id, UserRole.volunteer)


@router.patch(
    "/status/{user_id}",
    response_model=UserRead,
    dependencies=admin_only,
    responses={**CommonResponses.NOT_FOUND},
)
async def set_user_status(
    user_id: uuid.UUID, status_update: UserStatusUpdate, directory: UserDirectoryDep
):
    """Block or unblock a user. Admin only."""
    return directory.set_status(user_id, status_update.status)


@router.get(
    "/{email}", response_model=UserRead, responses={**CommonResponses.NOT_FOUND}
)
async def get_user(
    email: EmailStr,
    identity: IdentityDep,
    guard: GuardDep,
    directory: UserDirectoryDep,
):
    """Fetch the caller's own record."""
    guard.enforce(identity, guard.self_check(email))
    return directory.get(email)


@router.patch(
    "/{email}", response_model=UserRead, responses={**CommonResponses.NOT_FOUND}
)
async def update_profile(
    email: EmailStr,
    profile: UserProfileUpdate,
    identity: IdentityDep,
    guard: GuardDep,
    directory: UserDirectoryDep,
):
    """Update the caller's own profile fields.

    Only name, blood_group, district, upazila and avatar can change here.
    """
    guard.enforce(identity, guard.self_check(email))
    return directory.update_profile(email, profile)
