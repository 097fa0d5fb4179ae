"""Donation request router.

Fixed paths (``/public``, ``/all``) are declared before ``/{request_id}``.
"""

import uuid

from fastapi import APIRouter
from pydantic import EmailStr

from app.auth.dependencies import IdentityDep
from app.core.constants import CommonResponses, Routes
from app.donation.dependencies import LifecycleDep
from app.donation.models import DonationStatus
from app.donation.schemas import (
    DeleteResult,
    DonationRequestCreate,
    DonationRequestRead,
    DonationRequestUpdate,
)

router = APIRouter(
    prefix=Routes.DONATION_REQUEST.prefix,
    tags=[Routes.DONATION_REQUEST.tag],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.FORBIDDEN},
)


@router.post("", response_model=DonationRequestRead)
async def create_donation_request(
    body: DonationRequestCreate, identity: IdentityDep, lifecycle: LifecycleDep
):
    """File a donation request. Blocked users are refused.

    The stored status is always ``pending`` whatever the client sends.
    """
    return lifecycle.create(identity, body)


@router.get("/public", response_model=list[DonationRequestRead])
async def list_public_requests(lifecycle: LifecycleDep):
    """Pending requests, no authentication required."""
    return lifecycle.list_public_pending()


@router.get("", response_model=list[DonationRequestRead])
async def list_my_requests(
    identity: IdentityDep, lifecycle: LifecycleDep, email: EmailStr | None = None
):
    """The caller's own requests. ``email``, if given, must be the caller's."""
    return lifecycle.list_mine(identity, email)


@router.get("/all", response_model=list[DonationRequestRead])
async def list_all_requests(
    identity: IdentityDep,
    lifecycle: LifecycleDep,
    status: DonationStatus | None = None,
):
    """Every request, optionally filtered by status. Volunteer or admin."""
    return lifecycle.list_all(identity, status)


@router.get(
    "/{request_id}",
    response_model=DonationRequestRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_donation_request(
    request_id: uuid.UUID, identity: IdentityDep, lifecycle: LifecycleDep
):
    return lifecycle.get(identity, request_id)


@router.patch(
    "/{request_id}",
    response_model=DonationRequestRead,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.BAD_REQUEST},
)
async def update_donation_request(
    request_id: uuid.UUID,
    patch: DonationRequestUpdate,
    identity: IdentityDep,
    lifecycle: LifecycleDep,
):
    """Patch a request. Requester, volunteer or admin only."""
    return lifecycle.update(identity, request_id, patch)


@router.post(
    "/{request_id}/donate",
    response_model=DonationRequestRead,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.BAD_REQUEST},
)
async def donate(request_id: uuid.UUID, identity: IdentityDep, lifecycle: LifecycleDep):
    """Commit the caller as donor for a pending request."""
    return lifecycle.commit_donor(identity, request_id)


@router.delete(
    "/{request_id}",
    response_model=DeleteResult,
    responses={**CommonResponses.NOT_FOUND},
)
async def delete_donation_request(
    request_id: uuid.UUID, identity: IdentityDep, lifecycle: LifecycleDep
):
    """Delete a request. Requester, volunteer or admin only."""
    lifecycle.delete(identity, request_id)
    return DeleteResult(deleted=True, id=request_id)
