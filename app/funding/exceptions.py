"""Funding domain exceptions."""

from app.core.exceptions import ExternalServiceError, ValidationError


class InvalidAmountError(ValidationError):
    """Raised when a funding amount is not a positive number."""

    error_type = "invalid_amount"

    def __init__(self, message: str = "Amount must be a positive number"):
        super().__init__(message)


class PaymentProviderError(ExternalServiceError):
    """Raised when the payment provider cannot create a charge intent."""

    error_type = "payment_failed"

    def __init__(self, message: str = "Payment intent creation failed"):
        super().__init__(message)
