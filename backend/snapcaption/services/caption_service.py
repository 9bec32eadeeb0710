import json
import random
from typing import Any, Optional, Sequence

from snapcaption.config.settings import settings
from snapcaption.errors import CaptionFormatError
from snapcaption.prompts.caption_prompt import build_caption_prompt
from snapcaption.services.generative_client import GenerativeModelClient, generative_client
from snapcaption.utils.json_extractor import extract_json_text
from snapcaption.utils.logger import get_logger

logger = get_logger(__name__)

_CONTENT_KEYS = ("content", "text", "caption")


def normalize_captions(items: list, styles: Sequence[str]) -> list[dict[str, str]]:
    """
    Turn the parsed model output into [{"style", "content"}, ...].

    Plain strings take the requested style at the same position (or the last
    one). Objects may use "content", "text" or "caption". Blank entries are dropped.
    """
    captions = []
    for i, item in enumerate(items):
        fallback_style = styles[min(i, len(styles) - 1)] if styles else ""

        if isinstance(item, str):
            content, style = item, fallback_style
        elif isinstance(item, dict):
            content = next((item[k] for k in _CONTENT_KEYS if isinstance(item.get(k), str)), "")
            style = item.get("style") if isinstance(item.get("style"), str) else fallback_style
        else:
            continue

        content = content.strip()
        if content:
            captions.append({"style": style.strip() or fallback_style, "content": content})
    return captions


class CaptionService:
    def __init__(self, client: Optional[GenerativeModelClient] = None, rng: Optional[random.Random] = None):
        self.client = client or generative_client
        self.rng = rng or random.Random()

    async def generate_captions(
        self,
        image: bytes,
        mime_type: str,
        api_key: str,
        styles: Sequence[str],
        description: Optional[str] = None,
        place_name: Optional[str] = None,
        rating: Optional[int] = None,
    ) -> list[dict[str, str]]:
        description = (description or "").strip() or settings.default_description
        prompt = build_caption_prompt(
            description=description,
            styles=styles,
            place_name=place_name,
            rating=rating,
            rng=self.rng,
        )

        logger.info(f"Generating {len(styles)} caption(s) for description {description!r}")
        raw = await self.client.generate(
            prompt,
            api_key=api_key,
            model=settings.caption_model,
            image=image,
            mime_type=mime_type,
        )

        cleaned = extract_json_text(raw)
        try:
            parsed: Any = json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.error(f"Caption response is not JSON: {e}; raw={raw[:settings.request_log_body_limit]!r}")
            raise CaptionFormatError() from e

        if not isinstance(parsed, list) or len(parsed) == 0:
            logger.error(f"Caption response has the wrong shape: {type(parsed).__name__}")
            raise CaptionFormatError()

        captions = normalize_captions(parsed, styles)
        if not captions:
            logger.error("Caption response contained no usable captions")
            raise CaptionFormatError()

        logger.info(f"✅ Generated {len(captions)} caption(s)")
        return captions


caption_service = CaptionService()
