from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .routes import router
from ..core import orchestrator
from ..core.config import Settings
from ..core.search_client import SearchClient
from ..providers.factory import build_provider


def create_app(provider=None, cfg: Optional[Settings] = None, load_on_startup: bool = True) -> FastAPI:
    cfg = cfg or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with (provider or build_provider(cfg)) as opened:
            orchestrator.set_search_client(SearchClient(opened))
            if load_on_startup:
                # Initial load, like a map screen searching as soon as it appears.
                orchestrator.submit_search(cfg.search_query, cfg.default_region())
            try:
                yield
            finally:
                await orchestrator.wait_for_pending()
                orchestrator.set_search_client(None)

    app = FastAPI(title="KopiTiam Map API", version="0.1.0", lifespan=lifespan)
    app.state.cfg = cfg
    app.include_router(router, prefix="/v1")
    return app


app = create_app()
