"""Donation request models.

SQLModel table definition for DonationRequest and its status lifecycle.
"""

import uuid
from enum import Enum

from sqlmodel import Field, SQLModel

from app.core.mixins import TimestampMixin


class DonationStatus(str, Enum):
    """Lifecycle of a donation request.

    pending -> inprogress -> done
          \\-> canceled (from pending or inprogress)

    done and canceled are terminal. Nothing ever returns to pending.
    """

    pending = "pending"
    inprogress = "inprogress"
    done = "done"
    canceled = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    def can_transition_to(self, target: "DonationStatus") -> bool:
        """Whether ``self -> target`` is allowed.

        Re-applying the current status is always accepted so a repeated
        patch is harmless.
        """
        if target == self:
            return True
        return target in _NEXT_STATUSES[self]


TERMINAL_STATUSES = frozenset({DonationStatus.done, DonationStatus.canceled})

_NEXT_STATUSES: dict[DonationStatus, frozenset[DonationStatus]] = {
    DonationStatus.pending: frozenset(
        {DonationStatus.inprogress, DonationStatus.done, DonationStatus.canceled}
    ),
    DonationStatus.inprogress: frozenset(
        {DonationStatus.done, DonationStatus.canceled}
    ),
    DonationStatus.done: frozenset(),
    DonationStatus.canceled: frozenset(),
}


class DonationRequest(TimestampMixin, SQLModel, table=True):
    """Donation request database model.

    Location and schedule fields are free-form text.
    """

    __tablename__: str = "donation_requests"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    requester_name: str = Field(default="", max_length=100)
    requester_email: str = Field(index=True, max_length=255)
    recipient_name: str = Field(default="", max_length=100)
    blood_group: str | None = Field(default=None, max_length=5)
    recipient_district: str | None = Field(default=None, max_length=100)
    recipient_upazila: str | None = Field(default=None, max_length=100)
    hospital_name: str | None = Field(default=None, max_length=200)
    full_address: str | None = Field(default=None, max_length=500)
    donation_date: str | None = Field(default=None, max_length=32)
    donation_time: str | None = Field(default=None, max_length=32)
    request_message: str | None = Field(default=None, max_length=2000)
    donation_status: DonationStatus = Field(
        default=DonationStatus.pending, index=True, max_length=20
    )
    donor_name: str | None = Field(default=None, max_length=100)
    donor_email: str | None = Field(default=None, max_length=255)
