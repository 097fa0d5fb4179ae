"""Typed configuration loaded from the environment (and an optional .env).

Only JWT_SECRET_KEY is required. The Stripe and imgbb keys may be absent;
the integrations then fail per call with ``service_not_configured`` instead
of stopping the process.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings, read once through ``get_settings``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")

    # Database
    database_url: str = Field(
        default="sqlite:///./blood_donation.db", alias="DATABASE_URL"
    )

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # JWT credentials
    jwt_secret_key: str = Field(alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(
        default=60, alias="JWT_EXPIRES_MINUTES", ge=1, le=1440
    )

    # Payments (Stripe)
    stripe_secret_key: str | None = Field(default=None, alias="STRIPE_SECRET_KEY")
    stripe_api_base_url: str = Field(
        default="https://api.stripe.com", alias="STRIPE_API_BASE_URL"
    )
    payment_currency: str = Field(default="usd", alias="PAYMENT_CURRENCY")

    # Image hosting (imgbb)
    imgbb_api_key: str | None = Field(default=None, alias="IMGBB_API_KEY")
    imgbb_api_base_url: str = Field(
        default="https://api.imgbb.com", alias="IMGBB_API_BASE_URL"
    )

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = []
        for o in self.cors_origins.split(","):
            trimmed = o.strip()
            if trimmed:
                origins.append(trimmed)
        return origins

    @computed_field
    @property
    def jwt_expires_in(self) -> timedelta:
        """Get credential lifetime as timedelta."""
        return timedelta(minutes=self.jwt_expires_minutes)


@lru_cache
def get_settings() -> Settings:
    return Settings()
