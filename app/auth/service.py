"""Credential service.

Issues and verifies the bearer credentials (HS256 JWTs) that carry the
caller's email claim. Everything else in the app only sees the resulting
``Identity``.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any, Protocol

import jwt

from app.auth.exceptions import InvalidTokenError


@dataclass(frozen=True)
class Identity:
    """A verified caller, identified by email."""

    email: str


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime


class IdentityVerifier(Protocol):
    """Protocol for credential verification.

    Route dependencies depend on this protocol, so tests can swap in a fake.
    """

    def verify(self, token: str) -> Identity:
        """Verify a credential and return the identity it encodes."""
        ...


class TokenService:
    """JWT issue/verify with a shared secret."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(hours=1),
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, email: str, now: datetime | None = None) -> IssuedToken:
        """Sign a credential for ``email`` valid for the configured lifetime."""
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + self._expires_in
        claims: dict[str, Any] = {
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> Identity:
        """Decode and check a credential.

        Raises:
            InvalidTokenError: On bad signature, expiry, malformed token or a
                missing email claim.
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "email"]},
            )
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        email = claims.get("email")
        if not isinstance(email, str) or not email:
            raise InvalidTokenError()
        return Identity(email=email)


@lru_cache
def get_token_service() -> TokenService:
    """Get cached token service instance.

    The service is cached for the application lifetime since
    its configuration doesn't change at runtime.
    """
    from app.core.settings import get_settings

    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.jwt_expires_in,
    )
