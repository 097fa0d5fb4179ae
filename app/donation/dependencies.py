"""Donation request dependencies."""

from typing import Annotated

from fastapi import Depends

from app.auth.dependencies import GuardDep
from app.core.deps import SessionDep
from app.donation.repository import DonationRequestRepository
from app.donation.service import RequestLifecycleManager


def get_donation_request_repository(session: SessionDep) -> DonationRequestRepository:
    return DonationRequestRepository(session)


def get_lifecycle_manager(
    requests: Annotated[
        DonationRequestRepository, Depends(get_donation_request_repository)
    ],
    guard: GuardDep,
) -> RequestLifecycleManager:
    return RequestLifecycleManager(requests, guard)


LifecycleDep = Annotated[RequestLifecycleManager, Depends(get_lifecycle_manager)]
