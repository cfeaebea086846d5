from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

import pytest

from kopitiam.core.errors import SearchUnavailable
from kopitiam.providers.base import RawPlace, SearchRegion


class FakeProvider:
    """In-memory provider. Queries listed in `gates` block until their event is set."""

    provider_name = "fake"

    def __init__(
        self,
        results: Optional[Dict[str, List[RawPlace]]] = None,
        fail: bool = False,
        gates: Optional[Dict[str, asyncio.Event]] = None,
    ):
        self.results = results or {}
        self.fail = fail
        self.gates = gates or {}
        self.calls: List[tuple] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def search(self, query: str, region: SearchRegion) -> List[RawPlace]:
        self.calls.append((query, region))
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        if self.fail:
            raise SearchUnavailable("simulated network error", provider=self.provider_name)
        return list(self.results.get(query, []))


@pytest.fixture
def lau_pa_sat() -> SearchRegion:
    return SearchRegion(center_lat=1.280716, center_lng=103.850442, lat_delta=0.008, lng_delta=0.008)
