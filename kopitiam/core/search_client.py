from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..providers.base import RawPlace, SearchProvider, SearchRegion
from .errors import SearchUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of one search call.

    `places` is always a list, empty on failure, so callers that only read
    `places` treat a failed search like a search that matched nothing.
    Callers that care can tell the two apart through `failed` / `error`.
    """
    places: List[RawPlace] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, places: List[RawPlace]) -> "SearchOutcome":
        return cls(places=list(places))

    @classmethod
    def failure(cls, message: str) -> "SearchOutcome":
        return cls(places=[], error=message)

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return not self.places

    @property
    def status(self) -> str:
        if self.failed:
            return "failed"
        return "empty" if self.is_empty else "ok"


class SearchClient:
    def __init__(self, provider: SearchProvider):
        self.provider = provider

    async def search(self, query: str, region: SearchRegion) -> SearchOutcome:
        """One provider call, no retry. Provider failures come back as a failed outcome."""
        try:
            places = await self.provider.search(query, region)
        except SearchUnavailable as e:
            logger.warning("search %r via %s unavailable: %s", query, e.provider, e)
            return SearchOutcome.failure(str(e))
        return SearchOutcome.success(places)
