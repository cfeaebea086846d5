from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal

OutcomeStatus = Literal["ok", "empty", "failed", "pending"]

class RegionIn(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    center_lat: float = Field(ge=-90, le=90)
    center_lng: float = Field(ge=-180, le=180)
    lat_delta: float = Field(ge=0)
    lng_delta: float = Field(ge=0)

class CreateSearchRequest(BaseModel):
    query: Optional[str] = None
    region: Optional[RegionIn] = None

class CreateSearchResponse(BaseModel):
    status: str

class PointOfInterestOut(BaseModel):
    id: str
    name: str
    lat: float
    lng: float

class AnnotationsResponse(BaseModel):
    version: int
    status: OutcomeStatus
    error: Optional[str] = None
    points: List[PointOfInterestOut] = []
