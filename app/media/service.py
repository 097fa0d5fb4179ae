"""Image hosting.

Forwards uploads to imgbb and returns the hosted URL.
"""

import logging
from functools import lru_cache
from typing import Protocol

import httpx

from app.core.exceptions import (
    BadRequestError,
    ExternalServiceError,
    ServiceNotConfiguredError,
)
from app.core.http import get_image_client

logger = logging.getLogger(__name__)

UPLOAD_ENDPOINT = "/1/upload"


class ImageUploadError(ExternalServiceError):
    error_type = "image_upload_failed"

    def __init__(self, message: str = "Image upload failed"):
        super().__init__(message)


class ImageHost(Protocol):
    async def upload(self, image: str) -> str:
        """Upload a base64 payload or remote URL and return the hosted URL."""
        ...


class ImgbbImageHost:
    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.imgbb.com",
        client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._client = client

    async def upload(self, image: str) -> str:
        if not image or not image.strip():
            raise BadRequestError("image is required")
        if not self._api_key:
            raise ServiceNotConfiguredError("Image host is not configured")

        client = self._client or get_image_client(self._base_url)
        try:
            response = await client.post(
                UPLOAD_ENDPOINT, params={"key": self._api_key}, data={"image": image}
            )
        except httpx.RequestError as e:
            logger.warning("Image host unreachable: %s", type(e).__name__)
            raise ImageUploadError() from e

        if not response.is_success:
            logger.warning("Image host error: status=%s", response.status_code)
            raise ImageUploadError()

        try:
            return response.json()["data"]["url"]
        except (ValueError, KeyError, TypeError) as e:
            raise ImageUploadError() from e


@lru_cache
def get_image_host() -> ImgbbImageHost:
    from app.core.settings import get_settings

    settings = get_settings()
    return ImgbbImageHost(
        api_key=settings.imgbb_api_key, base_url=settings.imgbb_api_base_url
    )
