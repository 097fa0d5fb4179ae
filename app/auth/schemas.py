"""Auth domain schemas.

Request and response schemas for credential issuance.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr


class TokenRequest(BaseModel):
    """Identity claim to sign. Any extra keys sent by the client are ignored."""

    email: EmailStr


class TokenResponse(BaseModel):
    token: str
    expires_at: datetime
