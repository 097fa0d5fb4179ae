"""Funding router."""

from fastapi import APIRouter, Depends
from pydantic import EmailStr

from app.auth.dependencies import IdentityDep, require_auth
from app.core.constants import CommonResponses, Routes
from app.funding.dependencies import FundingLedgerDep
from app.funding.schemas import (
    FundingCreate,
    FundingRead,
    PaymentIntentRequest,
    PaymentIntentResponse,
)

router = APIRouter(
    prefix=Routes.FUNDING.prefix,
    tags=[Routes.FUNDING.tag],
    dependencies=[Depends(require_auth)],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.BAD_REQUEST},
)


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    responses={**CommonResponses.EXTERNAL_FAILURE},
)
async def create_payment_intent(
    body: PaymentIntentRequest, identity: IdentityDep, ledger: FundingLedgerDep
):
    """Create a card payment intent; ``amount`` is in major units."""
    client_secret = await ledger.create_charge_intent(identity, body.amount)
    return PaymentIntentResponse(client_secret=client_secret)


@router.post("/fundings", response_model=FundingRead)
async def record_funding(
    body: FundingCreate, identity: IdentityDep, ledger: FundingLedgerDep
):
    """Record a completed contribution for the caller."""
    return ledger.record_funding(identity, body)


@router.get(
    "/fundings",
    response_model=list[FundingRead],
    responses={**CommonResponses.FORBIDDEN},
)
async def list_fundings(
    identity: IdentityDep,
    ledger: FundingLedgerDep,
    donor_email: EmailStr | None = None,
):
    """The caller's contributions, newest first. Admins see every donor's."""
    return ledger.list_fundings(identity, donor_email)
