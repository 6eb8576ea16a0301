"""Offline search provider over the bundled mock catalogue."""

from tickerboard.services.mock_data import MOCK_SYMBOLS
from tickerboard.services.search_providers.base import SearchProvider, SearchResult


class MockSearchProvider(SearchProvider):
    """Matches symbols by prefix first, then names by substring. Needs no credential."""

    name = "mock"

    async def search(self, query: str) -> list[SearchResult]:
        q = query.strip().upper()
        if not q:
            return []

        prefix = [entry for entry in MOCK_SYMBOLS if entry["symbol"].startswith(q)]
        by_name = [
            entry for entry in MOCK_SYMBOLS
            if entry not in prefix and q in entry["name"].upper()
        ]
        return [
            SearchResult(
                symbol=entry["symbol"],
                name=entry["name"],
                type=entry["type"],
                region=entry["region"],
                currency=entry["currency"],
            )
            for entry in (prefix + by_name)[: self.limit]
        ]
