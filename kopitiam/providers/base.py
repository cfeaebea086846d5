# Provider interfaces and dataclasses.
# kopitiam/providers/base.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol


@dataclass(frozen=True)
class SearchRegion:
    """A map viewport (center + span) used to bias place searches."""
    center_lat: float
    center_lng: float
    lat_delta: float
    lng_delta: float

    def __post_init__(self):
        for name in ("center_lat", "center_lng", "lat_delta", "lng_delta"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"SearchRegion.{name} must be a finite number, got {value!r}")
        if self.lat_delta < 0 or self.lng_delta < 0:
            raise ValueError("SearchRegion spans must be non-negative")

    @property
    def south(self) -> float:
        return self.center_lat - self.lat_delta / 2.0

    @property
    def north(self) -> float:
        return self.center_lat + self.lat_delta / 2.0

    @property
    def west(self) -> float:
        return self.center_lng - self.lng_delta / 2.0

    @property
    def east(self) -> float:
        return self.center_lng + self.lng_delta / 2.0


@dataclass(frozen=True)
class RawPlace:
    """
    A provider-agnostic search hit, before any display normalization.
    `name` is whatever the provider sent (possibly None or empty).
    `payload` stores the raw-ish provider response fields for debugging/provenance.
    """
    name: Optional[str]
    lat: float
    lng: float
    source: str = "unknown"
    source_id: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict, compare=False)


class SearchProvider(Protocol):
    provider_name: str

    async def search(self, query: str, region: SearchRegion) -> List[RawPlace]:
        """
        Returns the provider's places for one query, in provider order.
        Raises SearchUnavailable when the provider errors or sends no usable response.
        """
        ...
