"""
OpenStreetMap Nominatim search provider.

Nominatim has no natural-language ranking like commercial place search, but a
bounded `viewbox` query gets close enough for a single map viewport.
"""
# kopitiam/providers/nominatim.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ..core.errors import SearchUnavailable
from .base import RawPlace, SearchRegion

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
FALLBACK_UA = "kopitiam-map/0.1 (contact: example@example.com)"


@dataclass(frozen=True)
class NominatimConfig:
    base_url: str = NOMINATIM_BASE_URL
    # Nominatim's usage policy requires an identifying User-Agent.
    user_agent: str = FALLBACK_UA
    language_code: str = "en"
    limit: int = 40
    timeout_s: float = 20.0


class NominatimProvider:
    provider_name = "osm"

    def __init__(self, cfg: Optional[NominatimConfig] = None, client: Optional[httpx.AsyncClient] = None):
        self.cfg = cfg or NominatimConfig()
        self._client = client

    async def __aenter__(self):
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.cfg.timeout_s)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client is not None:
            await self._client.aclose()
        self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("NominatimProvider must be used with 'async with' or provide a client.")
        return self._client

    def _params(self, query: str, region: SearchRegion) -> Dict[str, str]:
        return {
            "q": query,
            "format": "jsonv2",
            "viewbox": f"{region.west},{region.north},{region.east},{region.south}",
            "bounded": "1",
            "limit": str(self.cfg.limit),
            "accept-language": self.cfg.language_code,
        }

    async def search(self, query: str, region: SearchRegion) -> List[RawPlace]:
        url = f"{self.cfg.base_url.rstrip('/')}/search"
        try:
            resp = await self.client.get(
                url,
                params=self._params(query, region),
                headers={"User-Agent": self.cfg.user_agent},
            )
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise SearchUnavailable(f"Nominatim search failed: {e}", provider=self.provider_name) from e

        if not isinstance(data, list):
            raise SearchUnavailable("Nominatim returned no result list", provider=self.provider_name)

        results: List[RawPlace] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            try:
                lat = float(item["lat"])
                lng = float(item["lon"])
            except (KeyError, TypeError, ValueError):
                continue
            place_id: Any = item.get("place_id")
            results.append(
                RawPlace(
                    name=item.get("name"),
                    lat=lat,
                    lng=lng,
                    source=self.provider_name,
                    source_id=str(place_id) if place_id is not None else None,
                    payload=item,
                )
            )
        return results
