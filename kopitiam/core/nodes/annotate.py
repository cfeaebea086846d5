from __future__ import annotations

from ..mapper import to_points_of_interest
from ..workflow_types import WorkflowContext


class MapAnnotationsNode:
    name = "map_annotations"

    async def run(self, ctx: WorkflowContext) -> WorkflowContext:
        places = ctx.outcome.places if ctx.outcome is not None else []
        ctx.points = to_points_of_interest(places)
        return ctx
