from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from ..providers.base import RawPlace

FALLBACK_NAME = "Unknown Location"


class Coordinate(NamedTuple):
    lat: float
    lng: float


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class PointOfInterest:
    """A display-ready pin. `id` is minted per record and says nothing about the place."""
    name: str
    coordinate: Coordinate
    id: str = field(default_factory=_new_id)

    @property
    def lat(self) -> float:
        return self.coordinate.lat

    @property
    def lng(self) -> float:
        return self.coordinate.lng

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "lat": self.lat, "lng": self.lng}


def display_name(name: Optional[str]) -> str:
    """
    Label for a pin: the provider's name when it is a non-empty string,
    otherwise FALLBACK_NAME. Names are not stripped or otherwise rewritten.
    """
    if isinstance(name, str) and name:
        return name
    return FALLBACK_NAME


def to_point_of_interest(raw: RawPlace) -> PointOfInterest:
    # Works for anything exposing name/lat/lng, PointOfInterest included.
    return PointOfInterest(name=display_name(raw.name), coordinate=Coordinate(raw.lat, raw.lng))


def to_points_of_interest(raws: Iterable[RawPlace]) -> List[PointOfInterest]:
    """One PointOfInterest per input, same order. No filtering, dedup or cap."""
    return [to_point_of_interest(r) for r in raws]
