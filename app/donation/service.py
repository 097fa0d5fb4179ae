"""Donation request lifecycle.

Owns donation requests: who may file, read, change and delete them, and how
``donation_status`` may move. Status rules live on ``DonationStatus``; this
module applies them together with the ownership rules:

- create: the caller must be registered and not blocked, and files in their
  own name only. The stored status is always ``pending``.
- update/delete: the requester, or anyone ranked volunteer or above.
- commit_donor: any active user other than the requester, on a pending request.

Concurrent updates to the same request are last-write-wins.
"""

import logging
import uuid
from collections.abc import Sequence

from app.auth.guard import AuthorizationGuard
from app.auth.service import Identity
from app.donation.exceptions import (
    DonationRequestNotFoundError,
    InvalidTransitionError,
    NotRequestOwnerError,
    OwnRequestDonationError,
    RequesterMismatchError,
)
from app.donation.models import DonationRequest, DonationStatus
from app.donation.repository import DonationRequestRepository
from app.donation.schemas import DonationRequestCreate, DonationRequestUpdate
from app.user.models import UserRole

logger = logging.getLogger(__name__)

_STAFF = {UserRole.volunteer}


class RequestLifecycleManager:
    def __init__(self, requests: DonationRequestRepository, guard: AuthorizationGuard):
        self._requests = requests
        self._guard = guard

    def _get(self, request_id: uuid.UUID) -> DonationRequest:
        donation_request = self._requests.get(request_id)
        if donation_request is None:
            raise DonationRequestNotFoundError()
        return donation_request

    def _require_owner_or_staff(
        self, identity: Identity, donation_request: DonationRequest
    ) -> None:
        if donation_request.requester_email == identity.email:
            return
        if not self._guard.has_role(identity, _STAFF):
            raise NotRequestOwnerError()

    def create(
        self, identity: Identity, body: DonationRequestCreate
    ) -> DonationRequest:
        requester = self._guard.require_active(identity)
        if body.requester_email is not None and body.requester_email != identity.email:
            raise RequesterMismatchError()

        fields = body.model_dump(
            exclude_none=True, exclude={"requester_email", "donation_status"}
        )
        fields.setdefault("requester_name", requester.name)
        donation_request = DonationRequest(
            **fields,
            requester_email=identity.email,
            donation_status=DonationStatus.pending,
        )
        donation_request = self._requests.save(donation_request)
        logger.info(
            "Donation request created",
            extra={
                "actor": identity.email,
                "donation_request_id": str(donation_request.id),
                "donation_status": donation_request.donation_status.value,
            },
        )
        return donation_request

    def list_public_pending(self) -> Sequence[DonationRequest]:
        return self._requests.list(status=DonationStatus.pending)

    def list_mine(
        self, identity: Identity, email: str | None = None
    ) -> Sequence[DonationRequest]:
        """List the caller's own requests.

        ``email`` may be given explicitly but must then be the caller's.
        """
        target = email if email is not None else identity.email
        self._guard.require_self(identity, target)
        return self._requests.list(requester_email=target)

    def list_all(
        self, identity: Identity, status: DonationStatus | None = None
    ) -> Sequence[DonationRequest]:
        self._guard.require_role(identity, _STAFF)
        return self._requests.list(status=status)

    def get(self, identity: Identity, request_id: uuid.UUID) -> DonationRequest:
        return self._get(request_id)

    def update(
        self, identity: Identity, request_id: uuid.UUID, patch: DonationRequestUpdate
    ) -> DonationRequest:
        """Merge the fields present in ``patch`` into the stored request.

        Raises:
            DonationRequestNotFoundError: Unknown id.
            NotRequestOwnerError: Caller is neither requester nor staff.
            InvalidTransitionError: Status change breaks the lifecycle.
        """
        donation_request = self._get(request_id)
        self._require_owner_or_staff(identity, donation_request)

        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        target = changes.pop("donation_status", None)
        current = donation_request.donation_status
        if target is not None and not current.can_transition_to(target):
            raise InvalidTransitionError(current, target)

        for key, value in changes.items():
            setattr(donation_request, key, value)
        if target is not None:
            donation_request.donation_status = target

        donation_request = self._requests.save(donation_request)
        if target is not None and target != current:
            logger.info(
                "Donation request %s -> %s",
                current.value,
                target.value,
                extra={
                    "actor": identity.email,
                    "donation_request_id": str(request_id),
                    "donation_status": target.value,
                },
            )
        return donation_request

    def delete(self, identity: Identity, request_id: uuid.UUID) -> None:
        donation_request = self._get(request_id)
        self._require_owner_or_staff(identity, donation_request)
        self._requests.delete(donation_request)
        logger.info(
            "Donation request deleted",
            extra={"actor": identity.email, "donation_request_id": str(request_id)},
        )

    def commit_donor(
        self, identity: Identity, request_id: uuid.UUID
    ) -> DonationRequest:
        """Record the caller as donor and move the request to ``inprogress``."""
        donor = self._guard.require_active(identity)
        donation_request = self._get(request_id)
        if donation_request.requester_email == identity.email:
            raise OwnRequestDonationError()
        current = donation_request.donation_status
        if current != DonationStatus.pending:
            raise InvalidTransitionError(current, DonationStatus.inprogress)

        donation_request.donor_name = donor.name or donor.email
        donation_request.donor_email = donor.email
        donation_request.donation_status = DonationStatus.inprogress
        donation_request = self._requests.save(donation_request)
        logger.info(
            "Donor committed to donation request",
            extra={
                "actor": identity.email,
                "donation_request_id": str(request_id),
                "donation_status": DonationStatus.inprogress.value,
            },
        )
        return donation_request
