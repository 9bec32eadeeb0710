import asyncio
import io
import os
from typing import Optional

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from snapcaption.config.settings import settings
from snapcaption.errors import InvalidImageError


def _verify_image(data: bytes) -> None:
    with Image.open(io.BytesIO(data)) as img:
        img.verify()


def _type_allowed(value: str, allowed: list[str]) -> bool:
    value = value.lower()
    return any(t in value for t in allowed)


async def read_validated_image(upload: Optional[UploadFile]) -> tuple[bytes, str]:
    """
    Read an uploaded photo and check it before it goes anywhere near the model.
    Returns (bytes, mime_type); raises InvalidImageError otherwise.
    """
    if upload is None or not upload.filename:
        raise InvalidImageError("Please upload a photo")

    allowed = settings.allowed_image_type_list
    mime_type = upload.content_type or ""
    extension = os.path.splitext(upload.filename)[1].lstrip(".")
    # Both the declared type and the file extension have to look like an image.
    if not (_type_allowed(mime_type, allowed) and extension and _type_allowed(extension, allowed)):
        raise InvalidImageError("Only image files can be uploaded")

    limit = settings.max_upload_bytes
    data = await upload.read(limit + 1)
    if len(data) > limit:
        raise InvalidImageError(f"Image exceeds the size limit (max {limit // (1024 * 1024)}MB)")
    if not data:
        raise InvalidImageError("Please upload a photo")

    # Pillow decoding is blocking; keep it off the event loop.
    try:
        await asyncio.to_thread(_verify_image, data)
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError("The uploaded file is not a readable image") from e

    return data, mime_type
