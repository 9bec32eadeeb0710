import json
from typing import Any, Optional

from snapcaption.config.settings import settings
from snapcaption.prompts.place_prompt import build_place_prompt
from snapcaption.services.generative_client import GenerativeModelClient, generative_client
from snapcaption.utils.json_extractor import extract_json_text
from snapcaption.utils.logger import get_logger

logger = get_logger(__name__)


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v).strip() for v in value if str(v).strip()]


def fallback_place_info(name: str, raw: str) -> dict[str, Any]:
    """Placeholder payload used when the model's answer can't be parsed."""
    limit = settings.place_summary_fallback_chars
    text = (raw or "").strip()
    summary = text[:limit].rstrip() + "…" if len(text) > limit else text
    return {
        "name": name,
        "summary": summary,
        "highlights": [],
        "best_time_to_visit": "",
        "tips": [],
        "fallback": True,
    }


class PlaceInfoService:
    def __init__(self, client: Optional[GenerativeModelClient] = None):
        self.client = client or generative_client

    async def lookup(self, name: str, api_key: str) -> dict[str, Any]:
        """
        Ask the model for facts about a place.
        Unparseable answers degrade to fallback_place_info() instead of failing.
        """
        logger.info(f"Looking up place info for {name!r}")
        raw = await self.client.generate(
            build_place_prompt(name),
            api_key=api_key,
            model=settings.place_model,
        )

        try:
            parsed = json.loads(extract_json_text(raw))
        except json.JSONDecodeError:
            logger.warning(f"Place info for {name!r} is not JSON, using fallback")
            return fallback_place_info(name, raw)

        if not isinstance(parsed, dict):
            logger.warning(f"Place info for {name!r} is a {type(parsed).__name__}, using fallback")
            return fallback_place_info(name, raw)

        return {
            "name": str(parsed.get("name") or name).strip(),
            "summary": str(parsed.get("summary") or "").strip(),
            "highlights": _str_list(parsed.get("highlights")),
            "best_time_to_visit": str(parsed.get("best_time_to_visit") or "").strip(),
            "tips": _str_list(parsed.get("tips")),
            "fallback": False,
        }


place_info_service = PlaceInfoService()
