"""Funding schemas.

Amount positivity is checked by the ledger, not here, so that every caller
gets the same ``invalid_amount`` error.
"""

import uuid

from pydantic import Field
from sqlmodel import SQLModel

from app.core.mixins import UTCDatetime


class FundingCreate(SQLModel):
    """Request schema for POST /fundings."""

    amount: float
    donor_name: str | None = Field(default=None, max_length=100)
    transaction_id: str | None = Field(default=None, max_length=255)


class FundingRead(SQLModel):
    id: uuid.UUID
    donor_email: str
    donor_name: str | None
    amount: float
    transaction_id: str | None
    created_at: UTCDatetime


class PaymentIntentRequest(SQLModel):
    """Request schema for POST /create-payment-intent (major currency units)."""

    amount: float


class PaymentIntentResponse(SQLModel):
    client_secret: str
