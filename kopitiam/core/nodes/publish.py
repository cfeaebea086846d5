from __future__ import annotations

from ..results import ResultStore
from ..workflow_types import WorkflowContext


class PublishResultsNode:
    name = "publish_results"

    def __init__(self, store: ResultStore):
        self.store = store

    async def run(self, ctx: WorkflowContext) -> WorkflowContext:
        # A failed search still publishes, so stale pins are cleared.
        self.store.update(ctx.points, outcome=ctx.outcome)
        return ctx
