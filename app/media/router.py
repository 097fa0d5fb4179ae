"""Media router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.auth.dependencies import require_auth
from app.core.constants import CommonResponses, Routes
from app.media.schemas import ImageUploadRequest, ImageUploadResponse
from app.media.service import ImageHost, get_image_host

router = APIRouter(
    prefix=Routes.MEDIA.prefix,
    tags=[Routes.MEDIA.tag],
    dependencies=[Depends(require_auth)],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.EXTERNAL_FAILURE},
)


@router.post("/upload-image", response_model=ImageUploadResponse)
async def upload_image(
    body: ImageUploadRequest,
    image_host: Annotated[ImageHost, Depends(get_image_host)],
):
    """Upload an image (base64 or URL) to the image host."""
    image_url = await image_host.upload(body.image)
    return ImageUploadResponse(success=True, image_url=image_url)
