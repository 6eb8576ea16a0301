"""Alpha Vantage SYMBOL_SEARCH provider."""

import logging

import httpx

from tickerboard.services.errors import TransportError, require_api_key
from tickerboard.services.http import fetch_json
from tickerboard.services.search_providers.base import SearchProvider, SearchResult

logger = logging.getLogger(__name__)

ALPHAVANTAGE_URL = "https://www.alphavantage.co/query"

# Keys Alpha Vantage uses instead of an HTTP error status (rate limit, bad key, bad call).
_ERROR_KEYS = ("Error Message", "Information", "Note")


def _parse_matches(data: dict, limit: int) -> list[SearchResult]:
    """Map ``bestMatches`` entries ("1. symbol", "2. name", ...) to SearchResult."""
    results = []
    for match in data.get("bestMatches") or []:
        symbol = (match.get("1. symbol") or "").strip()
        if not symbol:
            continue
        results.append(SearchResult(
            symbol=symbol,
            name=match.get("2. name") or "",
            type=match.get("3. type") or None,
            region=match.get("4. region") or None,
            currency=match.get("8. currency") or None,
        ))
        if len(results) >= limit:
            break
    return results


class AlphaVantageProvider(SearchProvider):
    name = "alphavantage"

    async def search(self, query: str) -> list[SearchResult]:
        api_key = require_api_key(self.api_key, "Alpha Vantage")
        params = {"function": "SYMBOL_SEARCH", "keywords": query, "apikey": api_key}

        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            data = await fetch_json(client, ALPHAVANTAGE_URL, params, provider="Alpha Vantage")

        if not isinstance(data, dict):
            raise TransportError("Alpha Vantage returned an unexpected payload")
        for key in _ERROR_KEYS:
            if key in data and "bestMatches" not in data:
                logger.warning("Alpha Vantage rejected search for %r: %s", query, str(data[key])[:200])
                raise TransportError(f"Alpha Vantage error: {data[key]}")

        return _parse_matches(data, self.limit)
