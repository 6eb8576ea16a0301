"""Market overview cards — polled on an interval, mock data when unconfigured."""

import asyncio
import logging

import httpx

from tickerboard.config import settings
from tickerboard.services.errors import ProviderError, is_configured
from tickerboard.services.finnhub import fetch_quote
from tickerboard.services.mock_data import MOCK_DATA, default_quote
from tickerboard.utils import TTLCache

logger = logging.getLogger(__name__)

_CACHE_KEY = "market"
_market_cache = TTLCache(default_ttl=settings.market_refresh_seconds, max_size=1)


def _reset_market_cache() -> None:
    """Drop cached cards (useful for testing)."""
    _market_cache.clear()


def _merge_quote(card: dict, quote: dict) -> dict:
    """Overlay live quote fields onto a card, keeping card-only fields (name, volume, cap)."""
    merged = dict(card)
    for field in ("price", "change", "change_percent", "high", "low"):
        merged[field] = quote[field]
    return merged


async def fetch_market_data() -> list[dict]:
    """Return the index cards, live when a Finnhub key is configured."""
    cards = [dict(card) for card in MOCK_DATA]
    if not is_configured(settings.finnhub_api_key):
        logger.debug("No Finnhub key configured, serving mock market data")
        return cards

    token = settings.finnhub_api_key.strip()
    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout, follow_redirects=True) as client:
            quotes = await asyncio.gather(*(fetch_quote(client, card["symbol"], token) for card in cards))
    except ProviderError as exc:
        logger.warning("Live market data unavailable, serving mock data: %s", exc)
        return cards

    return [_merge_quote(card, quote) for card, quote in zip(cards, quotes)]


async def refresh_market_data() -> list[dict]:
    """Fetch fresh cards and store them in the cache."""
    cards = await fetch_market_data()
    _market_cache.set_value(_CACHE_KEY, cards)
    return cards


async def get_market_data() -> list[dict]:
    cached = _market_cache.get_value(_CACHE_KEY)
    if cached is not None:
        return cached
    return await refresh_market_data()


def fetch_stock_quote(symbol: str) -> dict:
    """Legacy quote lookup: the mock card for ``symbol`` or a default card."""
    symbol = symbol.strip().upper()
    for card in MOCK_DATA:
        if card["symbol"] == symbol:
            return dict(card)
    return default_quote(symbol)
