"""Donation request domain exceptions."""

from app.auth.exceptions import AuthorizationError
from app.core.exceptions import NotFoundError, ValidationError
from app.donation.models import DonationStatus


class DonationRequestNotFoundError(NotFoundError):
    """Raised when a donation request cannot be found."""

    error_type = "donation_request_not_found"

    def __init__(self, message: str = "Donation request not found"):
        super().__init__(message)


class NotRequestOwnerError(AuthorizationError):
    """Raised when a donor modifies a request they did not create."""

    error_type = "not_request_owner"

    def __init__(
        self, message: str = "only the requester, a volunteer or an admin may do this"
    ):
        super().__init__(message)


class RequesterMismatchError(AuthorizationError):
    """Raised when a request is filed on behalf of another email."""

    error_type = "requester_mismatch"

    def __init__(self, message: str = "requester_email must be your own email"):
        super().__init__(message)


class OwnRequestDonationError(ValidationError):
    """Raised when a requester tries to donate to their own request."""

    error_type = "own_request"

    def __init__(self, message: str = "You cannot donate to your own request"):
        super().__init__(message)


class InvalidTransitionError(ValidationError):
    """Raised when a donation status change breaks the lifecycle."""

    error_type = "invalid_transition"

    def __init__(self, current: DonationStatus, target: DonationStatus):
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move donation request from '{current.value}' to '{target.value}'"
        )
