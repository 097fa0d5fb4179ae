"""Media schemas."""

from sqlmodel import SQLModel


class ImageUploadRequest(SQLModel):
    """Request schema for POST /upload-image.

    ``image`` is base64 data or a URL. Emptiness is checked by the image host.
    """

    image: str = ""


class ImageUploadResponse(SQLModel):
    success: bool
    image_url: str
