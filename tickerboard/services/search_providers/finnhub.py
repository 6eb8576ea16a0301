"""Finnhub symbol lookup provider."""

import httpx

from tickerboard.services.errors import TransportError, require_api_key
from tickerboard.services.finnhub import FINNHUB_BASE_URL
from tickerboard.services.http import fetch_json
from tickerboard.services.search_providers.base import SearchProvider, SearchResult


def _parse_results(data: dict, limit: int) -> list[SearchResult]:
    """Map Finnhub ``result`` entries (symbol/displaySymbol/description/type) to SearchResult."""
    results = []
    for item in data.get("result") or []:
        symbol = (item.get("symbol") or "").strip()
        if not symbol:
            continue
        results.append(SearchResult(
            symbol=symbol,
            name=item.get("description") or "",
            display_text=item.get("displaySymbol") or symbol,
            type=item.get("type") or None,
        ))
        if len(results) >= limit:
            break
    return results


class FinnhubProvider(SearchProvider):
    name = "finnhub"

    async def search(self, query: str) -> list[SearchResult]:
        token = require_api_key(self.api_key, "Finnhub")

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            data = await fetch_json(
                client, f"{FINNHUB_BASE_URL}/search", {"q": query, "token": token}, provider="Finnhub",
            )

        if not isinstance(data, dict):
            raise TransportError("Finnhub returned an unexpected payload")
        if data.get("error"):
            raise TransportError(f"Finnhub error: {data['error']}")
        return _parse_results(data, self.limit)
