from __future__ import annotations

import asyncio
import logging
from typing import Optional, Set

from ..providers.base import SearchRegion
from .results import ResultStore
from .search_client import SearchClient
from .workflow import load_annotations

logger = logging.getLogger(__name__)

# Process-wide result set read by the display layer.
store = ResultStore()

_client: Optional[SearchClient] = None
_tasks: Set[asyncio.Task] = set()


def set_search_client(client: Optional[SearchClient]) -> None:
    global _client
    _client = client


def get_search_client() -> SearchClient:
    if _client is None:
        raise RuntimeError("search client not configured; call set_search_client() first")
    return _client


def _on_done(task: asyncio.Task) -> None:
    _tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("search run failed", exc_info=exc)


def submit_search(query: str, region: SearchRegion) -> asyncio.Task:
    """
    Schedule one pipeline run on the running loop and return immediately.
    Runs are never cancelled, so a slow stale run can overwrite a newer one.
    """
    task = asyncio.create_task(load_annotations(get_search_client(), store, query, region))
    _tasks.add(task)
    task.add_done_callback(_on_done)
    logger.info("queued search %r (%d in flight)", query, len(_tasks))
    return task


async def wait_for_pending() -> None:
    if _tasks:
        await asyncio.gather(*list(_tasks), return_exceptions=True)
