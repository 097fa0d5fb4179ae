"""Route prefixes, OpenAPI tags and the shared error response docs.

Several domains mount at the root because their public paths are flat
(``/jwt``, ``/fundings``, ``/upload-image``, ``/admin-stats``).
"""

from dataclasses import dataclass
from typing import Any

from app.models.error import ErrorResponse


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for a route group."""

    prefix: str
    tag: str


class Routes:
    """Route configurations for all API endpoints."""

    AUTH = RouteConfig(prefix="", tag="auth")
    USER = RouteConfig(prefix="/users", tag="users")
    DONATION_REQUEST = RouteConfig(prefix="/donation-requests", tag="donation-requests")
    FUNDING = RouteConfig(prefix="", tag="fundings")
    MEDIA = RouteConfig(prefix="", tag="media")
    STATS = RouteConfig(prefix="", tag="stats")
    HEALTH = RouteConfig(prefix="", tag="health")


# Common response definitions for reuse across routers
class CommonResponses:
    """Standard HTTP error response definitions for OpenAPI documentation."""

    UNAUTHORIZED: dict[int, dict[str, Any]] = {
        401: {
            "model": ErrorResponse,
            "description": "Not authenticated or invalid credentials",
        }
    }
    FORBIDDEN: dict[int, dict[str, Any]] = {
        403: {
            "model": ErrorResponse,
            "description": "User is blocked or lacks permissions",
        }
    }
    NOT_FOUND: dict[int, dict[str, Any]] = {
        404: {"model": ErrorResponse, "description": "Resource not found"}
    }
    BAD_REQUEST: dict[int, dict[str, Any]] = {
        400: {"model": ErrorResponse, "description": "Invalid request data"}
    }
    EXTERNAL_FAILURE: dict[int, dict[str, Any]] = {
        500: {"model": ErrorResponse, "description": "External service failure"}
    }
