from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..providers.base import SearchRegion
from .mapper import PointOfInterest
from .search_client import SearchOutcome


@dataclass
class WorkflowContext:
    query: str
    region: SearchRegion

    outcome: Optional[SearchOutcome] = None
    points: List[PointOfInterest] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
