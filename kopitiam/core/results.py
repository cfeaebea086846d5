from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .mapper import PointOfInterest
from .search_client import SearchOutcome

logger = logging.getLogger(__name__)

Subscriber = Callable[[Tuple[PointOfInterest, ...]], None]


class ResultStore:
    """
    Holds the current result set shown on the map.

    The pipeline is the only writer (via `update`); display code reads
    `current` or subscribes. Writes happen on the event loop thread, so no lock.
    """

    def __init__(self):
        self._points: Tuple[PointOfInterest, ...] = ()
        self._version = 0
        self._last_outcome: Optional[SearchOutcome] = None
        self._subscribers: List[Subscriber] = []

    @property
    def current(self) -> Tuple[PointOfInterest, ...]:
        return self._points

    @property
    def version(self) -> int:
        return self._version

    @property
    def last_outcome(self) -> Optional[SearchOutcome]:
        return self._last_outcome

    def update(self, points: Sequence[PointOfInterest], outcome: Optional[SearchOutcome] = None) -> None:
        # Replace, never merge.
        self._points = tuple(points)
        self._version += 1
        self._last_outcome = outcome
        for callback in list(self._subscribers):
            try:
                callback(self._points)
            except Exception:
                logger.exception("result subscriber %r failed", callback)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
