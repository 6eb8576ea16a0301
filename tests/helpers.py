"""Shared test helpers — HTTP mocking and scripted search providers."""

import asyncio

import httpx

from tickerboard.services.search_providers.base import SearchProvider, SearchResult

_RealAsyncClient = httpx.AsyncClient


def mock_http(monkeypatch, handler) -> list[httpx.Request]:
    """Route every httpx.AsyncClient through ``handler`` and record the requests."""
    seen: list[httpx.Request] = []

    def _recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    monkeypatch.setattr(
        httpx, "AsyncClient",
        lambda **kw: _RealAsyncClient(transport=httpx.MockTransport(_recording)),
    )
    return seen


def results(*symbols: str) -> list[SearchResult]:
    return [SearchResult(symbol=s, name=f"{s} Inc.") for s in symbols]


class RecordingProvider(SearchProvider):
    """Returns canned results (or raises ``error``) and records every query."""

    name = "recording"

    def __init__(self, found: list[SearchResult] | None = None, error: Exception | None = None):
        super().__init__(None)
        self.found = found or []
        self.error = error
        self.calls: list[str] = []

    async def search(self, query: str) -> list[SearchResult]:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return list(self.found)


class GatedProvider(SearchProvider):
    """Each call blocks until the test releases it with ``release(query, results)``."""

    name = "gated"

    def __init__(self):
        super().__init__(None)
        self.calls: list[str] = []
        self._pending: dict[str, asyncio.Future] = {}

    async def search(self, query: str) -> list[SearchResult]:
        self.calls.append(query)
        future = asyncio.get_running_loop().create_future()
        self._pending[query] = future
        return await future

    def release(self, query: str, found: list[SearchResult]) -> None:
        self._pending.pop(query).set_result(found)
