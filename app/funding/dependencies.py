"""Funding dependencies."""

from typing import Annotated

from fastapi import Depends

from app.auth.dependencies import GuardDep
from app.core.deps import SessionDep, SettingsDep
from app.funding.payments import StripePaymentGateway, get_payment_gateway
from app.funding.repository import FundingRepository
from app.funding.service import FundingLedger


def get_funding_repository(session: SessionDep) -> FundingRepository:
    return FundingRepository(session)


def get_funding_ledger(
    fundings: Annotated[FundingRepository, Depends(get_funding_repository)],
    gateway: Annotated[StripePaymentGateway, Depends(get_payment_gateway)],
    guard: GuardDep,
    settings: SettingsDep,
) -> FundingLedger:
    return FundingLedger(
        fundings, gateway, guard, currency=settings.payment_currency
    )


FundingLedgerDep = Annotated[FundingLedger, Depends(get_funding_ledger)]
