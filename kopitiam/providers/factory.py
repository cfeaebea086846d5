from __future__ import annotations

from ..core.config import Settings
from .base import SearchProvider
from .google_places import GooglePlacesConfig, GooglePlacesProvider
from .nominatim import NominatimConfig, NominatimProvider


def build_provider(settings: Settings) -> SearchProvider:
    """Create the provider named by `settings.search_provider` (not yet opened)."""
    name = settings.search_provider.strip().lower()
    if name == "google_places":
        return GooglePlacesProvider(
            GooglePlacesConfig(
                api_key=settings.google_places_api_key,
                timeout_s=settings.search_timeout_s,
            )
        )
    if name == "osm":
        return NominatimProvider(
            NominatimConfig(
                base_url=settings.nominatim_base_url,
                user_agent=settings.nominatim_user_agent,
                timeout_s=settings.search_timeout_s,
            )
        )
    raise ValueError(f"unknown search provider: {settings.search_provider!r}")
