from fastapi import APIRouter, Depends

from snapcaption.errors import InvalidRequestError
from snapcaption.routes.caption_routes import resolve_api_key
from snapcaption.schemas import PlaceInfo, PlaceInfoRequest
from snapcaption.services.place_service import PlaceInfoService, place_info_service
from snapcaption.utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["places"])
logger = get_logger(__name__)


def get_place_info_service() -> PlaceInfoService:
    return place_info_service


@router.post("/place-info", response_model=PlaceInfo)
async def place_info(
    body: PlaceInfoRequest,
    api_key: str = Depends(resolve_api_key),
    service: PlaceInfoService = Depends(get_place_info_service),
):
    """
    Structured facts about a named place.
    Falls back to a placeholder (fallback=true) when the model's answer can't be parsed.
    """
    name = body.name.strip()
    if not name:
        raise InvalidRequestError("Please enter a place name")

    result = await service.lookup(name, api_key=api_key)
    if result["fallback"]:
        logger.info("place-info — served fallback payload for %r", name)
    return result
