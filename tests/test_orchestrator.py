from __future__ import annotations

import logging

import pytest

from conftest import FakeProvider
from kopitiam.core import orchestrator
from kopitiam.core.results import ResultStore
from kopitiam.core.search_client import SearchClient
from kopitiam.providers.base import RawPlace


class BrokenProvider:
    provider_name = "broken"

    async def search(self, query, region):
        raise AttributeError("'list' object has no attribute 'get'")


@pytest.fixture
def fresh_store(monkeypatch):
    store = ResultStore()
    monkeypatch.setattr(orchestrator, "store", store)
    yield store
    orchestrator.set_search_client(None)


@pytest.mark.asyncio
async def test_submitted_search_publishes_to_shared_store(fresh_store, lau_pa_sat):
    provider = FakeProvider(results={"KopiTiam": [RawPlace(name="Lau Pa Sat", lat=1.2807, lng=103.8504)]})
    orchestrator.set_search_client(SearchClient(provider))

    task = orchestrator.submit_search("KopiTiam", lau_pa_sat)
    await orchestrator.wait_for_pending()

    assert task.done()
    assert [p.name for p in fresh_store.current] == ["Lau Pa Sat"]


@pytest.mark.asyncio
async def test_crashed_run_is_logged_and_does_not_break_shutdown(fresh_store, lau_pa_sat, caplog):
    orchestrator.set_search_client(SearchClient(BrokenProvider()))

    with caplog.at_level(logging.ERROR, logger="kopitiam.core.orchestrator"):
        orchestrator.submit_search("KopiTiam", lau_pa_sat)
        await orchestrator.wait_for_pending()

    errors = [r for r in caplog.records if r.name == "kopitiam.core.orchestrator" and r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert isinstance(errors[0].exc_info[1], AttributeError)
    assert fresh_store.version == 0


def test_submit_without_client_raises():
    orchestrator.set_search_client(None)
    with pytest.raises(RuntimeError):
        orchestrator.get_search_client()
