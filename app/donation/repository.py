"""Donation request persistence.

Listings come back in storage order; no ranking is applied.
"""

import uuid
from collections.abc import Sequence

from sqlalchemy import func
from sqlmodel import Session, select

from app.donation.models import DonationRequest, DonationStatus


class DonationRequestRepository:
    def __init__(self, session: Session):
        self._session = session

    def get(self, request_id: uuid.UUID) -> DonationRequest | None:
        return self._session.get(DonationRequest, request_id)

    def list(
        self,
        *,
        status: DonationStatus | None = None,
        requester_email: str | None = None,
    ) -> Sequence[DonationRequest]:
        statement = select(DonationRequest)
        if status is not None:
            statement = statement.where(DonationRequest.donation_status == status)
        if requester_email is not None:
            statement = statement.where(
                DonationRequest.requester_email == requester_email
            )
        return self._session.exec(statement).all()

    def count(self) -> int:
        return self._session.exec(
            select(func.count()).select_from(DonationRequest)
        ).one()

    def save(self, donation_request: DonationRequest) -> DonationRequest:
        self._session.add(donation_request)
        self._session.commit()
        self._session.refresh(donation_request)
        return donation_request

    def delete(self, donation_request: DonationRequest) -> None:
        self._session.delete(donation_request)
        self._session.commit()
