"""Error hierarchy shared by every domain.

Each class fixes the HTTP status and the machine-readable ``type`` that the
exception handlers put on the wire. Domain modules (``app/<domain>/exceptions``)
subclass these bases; 401 and 403 live in ``app.auth.exceptions``.
"""


class AppException(Exception):
    """Root of all errors the API reports deliberately."""

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


# 404
class NotFoundError(AppException):
    """An id or email that matches no stored record.

    Lookups of unknown users and donation requests fail with this 404 and a
    specific ``type`` (``user_not_found``, ``donation_request_not_found``).
    They never succeed with an empty body or a "not found" message.
    """

    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


# 400
class ValidationError(AppException):
    """Input that is well-formed JSON but breaks a business rule."""

    status_code = 400
    error_type = "validation_error"

    def __init__(self, message: str = "Validation failed"):
        super().__init__(message)


class BadRequestError(ValidationError):
    error_type = "bad_request"

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


# 500, external collaborators
class ExternalServiceError(AppException):
    """The payment provider or image host failed.

    Reported as a plain 500. Calls are made once and never retried.
    """

    status_code = 500
    error_type = "external_service_error"

    def __init__(self, message: str = "External service error"):
        super().__init__(message)


class ServiceNotConfiguredError(ExternalServiceError):
    """An integration was called without its API key."""

    error_type = "service_not_configured"

    def __init__(self, message: str = "External service is not configured"):
        super().__init__(message)
