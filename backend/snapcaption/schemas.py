from pydantic import BaseModel, Field


class Caption(BaseModel):
    style: str
    content: str


class CaptionResponse(BaseModel):
    captions: list[Caption]
    count: int


class PlaceInfoRequest(BaseModel):
    name: str = Field(..., max_length=200)


class PlaceInfo(BaseModel):
    name: str
    summary: str
    highlights: list[str] = []
    best_time_to_visit: str = ""
    tips: list[str] = []
    fallback: bool = False
