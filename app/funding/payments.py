"""Payment gateway.

Creates Stripe PaymentIntents over the REST API. The gateway is called once
per request; failures are reported, never retried.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import lru_cache
from typing import Any, Protocol

import httpx

from app.core.exceptions import ServiceNotConfiguredError
from app.core.http import get_payment_client
from app.funding.exceptions import InvalidAmountError, PaymentProviderError

logger = logging.getLogger(__name__)

PAYMENT_INTENTS_ENDPOINT = "/v1/payment_intents"


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount to the smallest currency unit.

    Uses the decimal text of ``amount`` so 19.99 becomes 1999, not 1998.

    Raises:
        InvalidAmountError: If the amount has more digits than the decimal
            context can hold.
    """
    cents = Decimal(str(amount)) * 100
    try:
        return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise InvalidAmountError("Amount is too large") from e


class PaymentGateway(Protocol):
    async def create_payment_intent(self, amount_minor: int, currency: str) -> str:
        """Create a charge intent and return its client secret."""
        ...


class StripePaymentGateway:
    def __init__(
        self,
        secret_key: str | None,
        base_url: str = "https://api.stripe.com",
        client: httpx.AsyncClient | None = None,
    ):
        self._secret_key = secret_key
        self._base_url = base_url
        self._client = client

    def _http(self) -> httpx.AsyncClient:
        return self._client or get_payment_client(self._base_url)

    async def create_payment_intent(self, amount_minor: int, currency: str) -> str:
        """Create a card PaymentIntent.

        Raises:
            ServiceNotConfiguredError: If no secret key is configured.
            PaymentProviderError: On network failure, a non-2xx response or a
                response without ``client_secret``.
        """
        if not self._secret_key:
            raise ServiceNotConfiguredError("Payment provider is not configured")

        payload: dict[str, Any] = {
            "amount": amount_minor,
            "currency": currency,
            "payment_method_types[]": "card",
        }
        try:
            response = await self._http().post(
                PAYMENT_INTENTS_ENDPOINT,
                data=payload,
                headers={"Authorization": f"Bearer {self._secret_key}"},
            )
        except httpx.RequestError as e:
            logger.warning("Payment provider unreachable: %s", type(e).__name__)
            raise PaymentProviderError("Payment provider unavailable") from e

        if not response.is_success:
            logger.warning(
                "Payment provider error: status=%s", response.status_code
            )
            raise PaymentProviderError()

        try:
            client_secret = response.json()["client_secret"]
        except (ValueError, KeyError, TypeError) as e:
            raise PaymentProviderError(
                "Payment provider returned an invalid response"
            ) from e
        return client_secret


@lru_cache
def get_payment_gateway() -> StripePaymentGateway:
    from app.core.settings import get_settings

    settings = get_settings()
    return StripePaymentGateway(
        secret_key=settings.stripe_secret_key,
        base_url=settings.stripe_api_base_url,
    )
