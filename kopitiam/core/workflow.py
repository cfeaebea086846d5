from __future__ import annotations

import logging
from typing import List

from ..providers.base import SearchRegion
from .mapper import PointOfInterest
from .nodes.annotate import MapAnnotationsNode
from .nodes.publish import PublishResultsNode
from .nodes.search import SearchPlacesNode
from .results import ResultStore
from .search_client import SearchClient
from .workflow_types import WorkflowContext

logger = logging.getLogger(__name__)


class WorkflowRunner:
    def __init__(self, nodes: List):
        self.nodes = nodes

    async def run(self, ctx: WorkflowContext) -> WorkflowContext:
        for node in self.nodes:
            ctx = await node.run(ctx)
        return ctx


async def load_annotations(
    client: SearchClient,
    store: ResultStore,
    query: str,
    region: SearchRegion,
) -> List[PointOfInterest]:
    """
    Search, map and publish in one go. Resolves to the published points,
    which is [] when the search failed. Overlapping calls are not cancelled
    or sequenced; whichever finishes last owns the store.
    """
    runner = WorkflowRunner(
        nodes=[
            SearchPlacesNode(client),
            MapAnnotationsNode(),
            PublishResultsNode(store),
        ]
    )
    ctx = await runner.run(WorkflowContext(query=query, region=region))
    logger.info(
        "loaded %d annotations for %r (status=%s, version=%d)",
        len(ctx.points),
        query,
        ctx.outcome.status if ctx.outcome else "unknown",
        store.version,
    )
    return ctx.points
