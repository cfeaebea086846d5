from __future__ import annotations

from ..search_client import SearchClient
from ..workflow_types import WorkflowContext


class SearchPlacesNode:
    name = "search_places"

    def __init__(self, client: SearchClient):
        self.client = client

    async def run(self, ctx: WorkflowContext) -> WorkflowContext:
        ctx.outcome = await self.client.search(ctx.query, ctx.region)
        if ctx.outcome.failed:
            ctx.errors.append(ctx.outcome.error or "search failed")
        return ctx
