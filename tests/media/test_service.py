"""Tests for app/media/service.py - imgbb uploads."""

from urllib.parse import parse_qs

import httpx
import pytest

from app.core.exceptions import BadRequestError, ServiceNotConfiguredError
from app.media.service import ImageUploadError, ImgbbImageHost

BASE_URL = "https://imgbb.test"


def host_with(handler, api_key: str | None = "imgbb-key") -> ImgbbImageHost:
    client = httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(handler)
    )
    return ImgbbImageHost(api_key, base_url=BASE_URL, client=client)


def no_request(request: httpx.Request) -> httpx.Response:
    raise AssertionError("no request expected")


@pytest.mark.asyncio
async def test_upload_returns_hosted_url():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["path"] = request.url.path
        captured["key"] = request.url.params["key"]
        captured["form"] = parse_qs(request.content.decode())
        return httpx.Response(
            200, json={"data": {"url": "https://i.ibb.co/x/pic.png"}, "success": True}
        )

    url = await host_with(handler).upload("aGVsbG8=")

    assert url == "https://i.ibb.co/x/pic.png"
    assert captured["path"] == "/1/upload"
    assert captured["key"] == "imgbb-key"
    assert captured["form"] == {"image": ["aGVsbG8="]}


@pytest.mark.asyncio
@pytest.mark.parametrize("image", ["", "   "])
async def test_empty_image_rejected(image):
    with pytest.raises(BadRequestError) as exc_info:
        await host_with(no_request).upload(image)

    assert exc_info.value.message == "image is required"


@pytest.mark.asyncio
async def test_missing_api_key():
    with pytest.raises(ServiceNotConfiguredError):
        await host_with(no_request, api_key=None).upload("aGVsbG8=")


@pytest.mark.asyncio
async def test_host_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"message": "Invalid base64"}})

    with pytest.raises(ImageUploadError) as exc_info:
        await host_with(handler).upload("???")

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_host_unreachable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ImageUploadError):
        await host_with(handler).upload("aGVsbG8=")


@pytest.mark.asyncio
async def test_malformed_host_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": True})

    with pytest.raises(ImageUploadError):
        await host_with(handler).upload("aGVsbG8=")
