"""Tests for media router."""

from fastapi.testclient import TestClient

from app.core.exceptions import BadRequestError
from app.media.service import ImageUploadError


def test_upload_image(client: TestClient, auth_headers, donor, mock_image_host):
    response = client.post(
        "/upload-image", json={"image": "aGVsbG8="}, headers=auth_headers(donor.email)
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "image_url": "https://i.ibb.co/abc/image.png",
    }
    mock_image_host.upload.assert_awaited_once_with("aGVsbG8=")


def test_upload_image_missing_payload(
    client: TestClient, auth_headers, donor, mock_image_host
):
    mock_image_host.upload.side_effect = BadRequestError("image is required")

    response = client.post("/upload-image", json={}, headers=auth_headers(donor.email))

    assert response.status_code == 400
    assert response.json() == {"type": "bad_request", "message": "image is required"}


def test_upload_image_host_failure(
    client: TestClient, auth_headers, donor, mock_image_host
):
    mock_image_host.upload.side_effect = ImageUploadError()

    response = client.post(
        "/upload-image", json={"image": "aGVsbG8="}, headers=auth_headers(donor.email)
    )

    assert response.status_code == 500
    assert response.json()["type"] == "image_upload_failed"


def test_upload_image_unauthenticated(client: TestClient, mock_image_host):
    response = client.post("/upload-image", json={"image": "aGVsbG8="})

    assert response.status_code == 401
    mock_image_host.upload.assert_not_called()
