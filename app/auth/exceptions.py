"""Auth domain exceptions.

Authentication (401) and authorization (403) failures.
"""

from app.core.exceptions import AppException


# Authentication errors (401)
class AuthenticationError(AppException):
    """Base class for authentication failures.

    Every credential problem is reported with the same type and message so
    callers cannot tell a missing token from an expired or forged one.
    """

    status_code = 401
    error_type = "unauthenticated"

    def __init__(self, message: str = "unauthorized access"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised by the token service when a credential fails verification."""


# Authorization errors (403)
class AuthorizationError(AppException):
    """Base class for authorization failures."""

    status_code = 403
    error_type = "forbidden"

    def __init__(self, message: str = "forbidden access"):
        super().__init__(message)


class RoleRequiredError(AuthorizationError):
    """Raised when the caller's role does not pass a role gate."""

    error_type = "role_required"


class NotSelfError(AuthorizationError):
    """Raised when a caller acts on a record that belongs to someone else."""

    error_type = "not_owner"


class UserBlockedError(AuthorizationError):
    """Raised when a blocked account attempts a restricted action."""

    error_type = "user_blocked"

    def __init__(self, message: str = "blocked user"):
        super().__init__(message)


class UnregisteredUserError(AuthorizationError):
    """Raised when a verified identity has no user record."""

    error_type = "user_not_registered"

    def __init__(self, message: str = "user is not registered"):
        super().__init__(message)
