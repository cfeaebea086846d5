import os

from pydantic import BaseModel, Field

from ..providers.base import SearchRegion


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


class Settings(BaseModel):
    search_provider: str = Field(default_factory=lambda: _env("SEARCH_PROVIDER", "osm"))
    google_places_api_key: str = Field(default_factory=lambda: _env("GOOGLE_PLACES_API_KEY", ""))
    nominatim_base_url: str = Field(
        default_factory=lambda: _env("NOMINATIM_BASE_URL", "https://nominatim.openstreetmap.org")
    )
    nominatim_user_agent: str = Field(
        default_factory=lambda: _env("NOMINATIM_USER_AGENT", "kopitiam-map/0.1 (contact: example@example.com)")
    )
    search_timeout_s: float = Field(default_factory=lambda: float(_env("SEARCH_TIMEOUT_S", "20")))

    # KopiTiam is a Singapore coffee shop; the demo viewport is Lau Pa Sat.
    search_query: str = Field(default_factory=lambda: _env("SEARCH_QUERY", "KopiTiam"))
    region_center_lat: float = Field(default_factory=lambda: float(_env("REGION_CENTER_LAT", "1.280716")))
    region_center_lng: float = Field(default_factory=lambda: float(_env("REGION_CENTER_LNG", "103.850442")))
    region_lat_delta: float = Field(default_factory=lambda: float(_env("REGION_LAT_DELTA", "0.008")))
    region_lng_delta: float = Field(default_factory=lambda: float(_env("REGION_LNG_DELTA", "0.008")))

    api_key: str = Field(default_factory=lambda: _env("KOPITIAM_API_KEY", ""))
    log_level: str = Field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    def default_region(self) -> SearchRegion:
        return SearchRegion(
            center_lat=self.region_center_lat,
            center_lng=self.region_center_lng,
            lat_delta=self.region_lat_delta,
            lng_delta=self.region_lng_delta,
        )

