from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Header, UploadFile

from snapcaption.config.settings import settings
from snapcaption.errors import InvalidRequestError, MissingApiKeyError
from snapcaption.prompts.styles import DEFAULT_STYLES, RATING_TONES, STYLES
from snapcaption.schemas import CaptionResponse
from snapcaption.services.caption_service import CaptionService, caption_service
from snapcaption.utils.image_validation import read_validated_image
from snapcaption.utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["captions"])
logger = get_logger(__name__)


def get_caption_service() -> CaptionService:
    return caption_service


def resolve_api_key(x_api_key: Optional[str] = Header(default=None)) -> str:
    """The caller's key from x-api-key, falling back to the server key if one is configured."""
    key = (x_api_key or "").strip() or (settings.openai_api_key or "").strip()
    if not key:
        raise MissingApiKeyError()
    return key


def parse_styles(values: List[str]) -> list[str]:
    """Accept repeated form fields, comma-separated values, or both. Order kept, duplicates dropped."""
    styles: list[str] = []
    for value in values:
        for key in value.split(","):
            key = key.strip().lower()
            if not key or key in styles:
                continue
            if key not in STYLES:
                raise InvalidRequestError(
                    f"Unknown style '{key}'. Choose from: {', '.join(STYLES)}"
                )
            styles.append(key)
    return styles or list(DEFAULT_STYLES)


def parse_rating(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        rating = int(value)
    except ValueError:
        raise InvalidRequestError("Rating must be a whole number from 1 to 5")
    if rating not in RATING_TONES:
        raise InvalidRequestError("Rating must be a whole number from 1 to 5")
    return rating


# ─────────────────────────────────────────────────────────────
# POST /api/caption
# multipart: image, description, styles, place_name, rating
# ─────────────────────────────────────────────────────────────

@router.post("/caption", response_model=CaptionResponse)
async def create_captions(
    image: Optional[UploadFile] = File(None),
    description: str = Form(""),
    styles: List[str] = Form([]),
    place_name: str = Form(""),
    rating: Optional[str] = Form(None),
    api_key: str = Depends(resolve_api_key),
    service: CaptionService = Depends(get_caption_service),
):
    """
    Generate social-media captions for an uploaded photo.
    Returns { captions: [{style, content}, ...], count }.
    """
    selected_styles = parse_styles(styles)
    selected_rating = parse_rating(rating)
    data, mime_type = await read_validated_image(image)

    logger.info(
        "caption — %d bytes, styles=%s, place=%r, rating=%s",
        len(data), selected_styles, place_name.strip() or None, selected_rating,
    )

    captions = await service.generate_captions(
        image=data,
        mime_type=mime_type,
        api_key=api_key,
        styles=selected_styles,
        description=description,
        place_name=place_name.strip() or None,
        rating=selected_rating,
    )
    return {"captions": captions, "count": len(captions)}


@router.get("/styles")
def list_styles():
    """Available writing styles, for the frontend's style picker."""
    return {
        "styles": [
            {"key": key, "label": info.label, "description": info.description, "emoji": info.emoji}
            for key, info in STYLES.items()
        ],
        "default": list(DEFAULT_STYLES),
    }
