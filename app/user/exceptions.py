"""User domain exceptions.

User-related exceptions for not found and invalid admin changes.
"""

from app.core.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when user cannot be found."""

    error_type = "user_not_found"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class InvalidRoleError(ValidationError):
    """Raised when an admin action targets a role that cannot be assigned."""

    error_type = "invalid_role"

    def __init__(self, message: str = "Role cannot be assigned"):
        super().__init__(message)
