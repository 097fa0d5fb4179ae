"""Funding ledger.

Records contributions and creates payment intents. Any authenticated caller
may fund; there is no role gate. Listings are private: donors see their own
fundings and only admins see the whole ledger. Recording a funding and charging are
independent calls: a failed charge never removes an earlier record.
"""

import logging
import math
from collections.abc import Sequence

from app.auth.guard import AuthorizationGuard
from app.auth.service import Identity
from app.funding.exceptions import InvalidAmountError
from app.funding.models import Funding
from app.funding.payments import PaymentGateway, to_minor_units
from app.funding.repository import FundingRepository
from app.funding.schemas import FundingCreate
from app.user.models import UserRole

logger = logging.getLogger(__name__)


def _validate_amount(amount: float) -> None:
    if isinstance(amount, bool) or not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError()


class FundingLedger:
    def __init__(
        self,
        fundings: FundingRepository,
        gateway: PaymentGateway,
        guard: AuthorizationGuard,
        currency: str = "usd",
    ):
        self._fundings = fundings
        self._gateway = gateway
        self._guard = guard
        self._currency = currency

    def record_funding(self, identity: Identity, funding: FundingCreate) -> Funding:
        _validate_amount(funding.amount)
        record = Funding(
            donor_email=identity.email,
            donor_name=funding.donor_name,
            amount=funding.amount,
            transaction_id=funding.transaction_id,
        )
        record = self._fundings.add(record)
        logger.info(
            "Funding of %s recorded", record.amount, extra={"actor": identity.email}
        )
        return record

    async def create_charge_intent(self, identity: Identity, amount: float) -> str:
        """Create a payment intent for ``amount`` (major units).

        Returns:
            The provider's opaque client secret.
        """
        _validate_amount(amount)
        amount_minor = to_minor_units(amount)
        if amount_minor <= 0:
            raise InvalidAmountError("Amount is below the smallest currency unit")
        client_secret = await self._gateway.create_payment_intent(
            amount_minor, self._currency
        )
        logger.info(
            "Payment intent created for %s %s",
            amount_minor,
            self._currency,
            extra={"actor": identity.email},
        )
        return client_secret

    def list_fundings(
        self, identity: Identity, donor_email: str | None = None
    ) -> Sequence[Funding]:
        """List fundings visible to the caller, newest first.

        Admins get the whole ledger, optionally filtered by ``donor_email``.
        Everyone else gets their own records, and naming another donor is 403.
        """
        if self._guard.has_role(identity, {UserRole.admin}):
            return self._fundings.list(donor_email)
        if donor_email is not None:
            self._guard.require_self(identity, donor_email)
        return self._fundings.list(identity.email)

    def total(self) -> float:
        return self._fundings.total()
