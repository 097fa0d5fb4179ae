"""Error response schema for consistent API error formatting."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    ``type`` is a stable machine-readable code (``unauthenticated``,
    ``user_blocked``, ``invalid_transition`` ...); ``message`` is for humans.
    """

    type: str
    message: str
