"""Search provider registry — maps configured provider names to provider classes."""

from tickerboard.config import settings
from tickerboard.services.search_providers.alphavantage import AlphaVantageProvider
from tickerboard.services.search_providers.base import SearchProvider, SearchResult
from tickerboard.services.search_providers.finnhub import FinnhubProvider
from tickerboard.services.search_providers.mock import MockSearchProvider

__all__ = ["SearchProvider", "SearchResult", "get_search_provider", "get_available_providers"]

_PROVIDERS: dict[str, type[SearchProvider]] = {
    "alphavantage": AlphaVantageProvider,
    "finnhub": FinnhubProvider,
    "mock": MockSearchProvider,
}

# Settings attribute holding each provider's credential.
_API_KEY_SETTINGS = {
    "alphavantage": "alphavantage_api_key",
    "finnhub": "finnhub_api_key",
}


def get_search_provider(name: str | None = None) -> SearchProvider:
    """Instantiate the named provider (default: ``settings.search_provider``)."""
    key = (name or settings.search_provider).lower()
    cls = _PROVIDERS.get(key)
    if cls is None:
        raise ValueError(f"Unknown search provider: {key!r}. Available: {list(_PROVIDERS)}")
    api_key_attr = _API_KEY_SETTINGS.get(key)
    return cls(
        getattr(settings, api_key_attr) if api_key_attr else None,
        limit=settings.search_result_limit,
        timeout=settings.http_timeout,
    )


def get_available_providers() -> dict[str, dict]:
    """Return metadata about registered providers for the UI."""
    return {
        key: {"key": key, "label": key.title(), "needs_api_key": key in _API_KEY_SETTINGS}
        for key in _PROVIDERS
    }
