from __future__ import annotations

import math

import pytest

from kopitiam.core.config import Settings
from kopitiam.providers.base import SearchRegion


def test_defaults_point_at_lau_pa_sat(monkeypatch):
    for name in ("SEARCH_QUERY", "REGION_CENTER_LAT", "REGION_CENTER_LNG", "REGION_LAT_DELTA", "REGION_LNG_DELTA"):
        monkeypatch.delenv(name, raising=False)

    cfg = Settings()
    region = cfg.default_region()

    assert cfg.search_query == "KopiTiam"
    assert (region.center_lat, region.center_lng) == (1.280716, 103.850442)
    assert (region.lat_delta, region.lng_delta) == (0.008, 0.008)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEARCH_QUERY", "Hawker centre")
    monkeypatch.setenv("REGION_CENTER_LAT", "1.3")
    monkeypatch.setenv("SEARCH_PROVIDER", "google_places")

    cfg = Settings()

    assert cfg.search_query == "Hawker centre"
    assert cfg.default_region().center_lat == 1.3
    assert cfg.search_provider == "google_places"


@pytest.mark.parametrize("bad", [math.nan, math.inf, "1.28", None])
def test_region_rejects_non_finite_values(bad):
    with pytest.raises(ValueError):
        SearchRegion(center_lat=bad, center_lng=103.85, lat_delta=0.008, lng_delta=0.008)


def test_region_rejects_negative_span():
    with pytest.raises(ValueError):
        SearchRegion(center_lat=1.28, center_lng=103.85, lat_delta=-0.1, lng_delta=0.008)
