# kopitiam/providers/google_places.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ..core.errors import SearchUnavailable
from .base import RawPlace, SearchRegion


def _safe_get(d: Dict[str, Any], path: List[str], default=None):
    cur: Any = d
    for key in path:
        if not isinstance(cur, dict) or key not in cur:
            return default
        cur = cur[key]
    return cur


@dataclass(frozen=True)
class GooglePlacesConfig:
    api_key: str
    # e.g. "en" or "en-SG"
    language_code: str = "en"
    # e.g. "SG" for Singapore bias in results
    region_code: Optional[str] = "SG"

    timeout_s: float = 20.0

    # Keep this lean to reduce billing/latency: a pin only needs name + location.
    search_field_mask: str = (
        "places.id,"
        "places.displayName.text,"
        "places.location"
    )


class GooglePlacesProvider:
    """
    Google Places API v1 text search:
      - POST https://places.googleapis.com/v1/places:searchText

    Auth header:
      - X-Goog-Api-Key: <key>

    Field masks:
      - X-Goog-FieldMask: <comma-separated fields>

    One request per search. Failures surface as SearchUnavailable, never retried.
    """

    provider_name = "google_places"
    _BASE_URL = "https://places.googleapis.com/v1"

    def __init__(self, cfg: GooglePlacesConfig, client: Optional[httpx.AsyncClient] = None):
        if not cfg.api_key:
            raise ValueError("GooglePlacesConfig.api_key is required")
        self.cfg = cfg
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
            raise RuntimeError("GooglePlacesProvider must be used with 'async with' or provide a client.")
        return self._client

    def _headers(self) -> Dict[str, str]:
        return {
            "X-Goog-Api-Key": self.cfg.api_key,
            "X-Goog-FieldMask": self.cfg.search_field_mask,
            "Content-Type": "application/json",
        }

    def _body(self, query: str, region: SearchRegion) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "textQuery": query,
            "languageCode": self.cfg.language_code,
            # Restrict to the visible viewport, like a map search box would.
            "locationRestriction": {
                "rectangle": {
                    "low": {"latitude": region.south, "longitude": region.west},
                    "high": {"latitude": region.north, "longitude": region.east},
                }
            },
        }
        if self.cfg.region_code:
            body["regionCode"] = self.cfg.region_code
        return body

    async def search(self, query: str, region: SearchRegion) -> List[RawPlace]:
        url = f"{self._BASE_URL}/places:searchText"
        try:
            resp = await self.client.post(url, headers=self._headers(), json=self._body(query, region))
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise SearchUnavailable(f"Google Places search failed: {e}", provider=self.provider_name) from e

        if not isinstance(data, dict):
            raise SearchUnavailable("Google Places returned no response object", provider=self.provider_name)

        # An empty match list comes back as "{}" rather than {"places": []}.
        places = data.get("places", []) or []
        results: List[RawPlace] = []
        if not isinstance(places, list):
            raise SearchUnavailable("Google Places returned a malformed place list", provider=self.provider_name)
        for p in places:
            loc = _safe_get(p, ["location"])
            if not isinstance(loc, dict):
                continue
            try:
                lat = float(loc["latitude"])
                lng = float(loc["longitude"])
            except (KeyError, TypeError, ValueError):
                continue
            results.append(
                RawPlace(
                    name=_safe_get(p, ["displayName", "text"]),
                    lat=lat,
                    lng=lng,
                    source=self.provider_name,
                    source_id=_safe_get(p, ["id"]),
                    payload=p,
                )
            )
        return results
