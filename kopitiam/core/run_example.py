from __future__ import annotations

import asyncio
from pathlib import Path
from dotenv import load_dotenv

from kopitiam.core.config import Settings
from kopitiam.core.logging_config import configure_logging
from kopitiam.core.results import ResultStore
from kopitiam.core.search_client import SearchClient
from kopitiam.core.workflow import load_annotations
from kopitiam.providers.factory import build_provider


async def main():
    repo_root = Path(__file__).resolve().parents[2]
    load_dotenv(repo_root / ".env", override=False)

    cfg = Settings()
    configure_logging(cfg.log_level)

    store = ResultStore()
    store.subscribe(lambda points: print(f"display now shows {len(points)} pins"))

    async with build_provider(cfg) as provider:
        points = await load_annotations(SearchClient(provider), store, cfg.search_query, cfg.default_region())

    outcome = store.last_outcome
    if outcome is not None and outcome.failed:
        print(f"search failed: {outcome.error}")
    for p in points:
        print(f"{p.name}\t{p.lat:.6f},{p.lng:.6f}\t{p.id}")

if __name__ == "__main__":
    asyncio.run(main())
