"""Donation request schemas.

``donation_status`` is accepted on create only so that clients sending it do
not get a validation error; the stored value is always ``pending``.
"""

import uuid

from pydantic import EmailStr, Field
from sqlmodel import SQLModel

from app.core.mixins import UTCDatetime
from app.donation.models import DonationStatus


class DonationRequestFields(SQLModel):
    """Free-form recipient, location and schedule fields."""

    requester_name: str | None = Field(default=None, max_length=100)
    recipient_name: str | None = Field(default=None, max_length=100)
    blood_group: str | None = Field(default=None, max_length=5)
    recipient_district: str | None = Field(default=None, max_length=100)
    recipient_upazila: str | None = Field(default=None, max_length=100)
    hospital_name: str | None = Field(default=None, max_length=200)
    full_address: str | None = Field(default=None, max_length=500)
    donation_date: str | None = Field(default=None, max_length=32)
    donation_time: str | None = Field(default=None, max_length=32)
    request_message: str | None = Field(default=None, max_length=2000)


class DonationRequestCreate(DonationRequestFields):
    """Request schema for POST /donation-requests."""

    requester_email: EmailStr | None = None
    donation_status: DonationStatus | None = None


class DonationRequestUpdate(DonationRequestFields):
    """Request schema for PATCH /donation-requests/{id}.

    Field-level merge: only the keys present in the body are applied.
    ``id`` and ``requester_email`` are not patchable.
    """

    donation_status: DonationStatus | None = None
    donor_name: str | None = Field(default=None, max_length=100)
    donor_email: EmailStr | None = None


class DonationRequestRead(SQLModel):
    """Response schema for a donation request."""

    id: uuid.UUID
    requester_name: str
    requester_email: str
    recipient_name: str
    blood_group: str | None
    recipient_district: str | None
    recipient_upazila: str | None
    hospital_name: str | None
    full_address: str | None
    donation_date: str | None
    donation_time: str | None
    request_message: str | None
    donation_status: DonationStatus
    donor_name: str | None
    donor_email: str | None
    created_at: UTCDatetime
    updated_at: UTCDatetime


class DeleteResult(SQLModel):
    deleted: bool
    id: uuid.UUID
