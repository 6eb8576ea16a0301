"""Stock detail view — quote, company profile and recent news for one symbol."""

import asyncio
import logging

import httpx

from tickerboard.config import settings
from tickerboard.services.errors import ProviderError, require_api_key
from tickerboard.services.finnhub import fetch_news, fetch_profile, fetch_quote

logger = logging.getLogger(__name__)

NEWS_LIMIT = 10


async def fetch_stock_details(symbol: str) -> dict:
    """Fetch quote, profile and news concurrently.

    All three calls must succeed; the first failure fails the whole fetch.

    Raises:
        ConfigurationError: no usable Finnhub key.
        TransportError: any of the three requests failed.
    """
    token = require_api_key(settings.finnhub_api_key, "Finnhub")
    symbol = symbol.strip().upper()

    async with httpx.AsyncClient(timeout=settings.http_timeout, follow_redirects=True) as client:
        quote, profile, news = await asyncio.gather(
            fetch_quote(client, symbol, token),
            fetch_profile(client, symbol, token),
            fetch_news(client, symbol, token),
        )

    return {
        "symbol": symbol,
        "quote": quote,
        "profile": profile,
        "news": news[:NEWS_LIMIT],
        "is_placeholder": False,
    }


def placeholder_details(symbol: str) -> dict:
    """Best-effort detail object: symbol echoed as name, zeroed numbers, no news."""
    symbol = symbol.strip().upper()
    return {
        "symbol": symbol,
        "quote": {
            "symbol": symbol,
            "price": 0.0,
            "change": 0.0,
            "change_percent": 0.0,
            "high": 0.0,
            "low": 0.0,
            "open": 0.0,
            "previous_close": 0.0,
        },
        "profile": {"symbol": symbol, "name": symbol, "market_cap": 0.0},
        "news": [],
        "is_placeholder": True,
    }


async def get_stock_details(symbol: str) -> dict:
    """Detail view payload, degrading to a placeholder when the provider fails."""
    try:
        return await fetch_stock_details(symbol)
    except ProviderError as exc:
        logger.warning("Detail fetch for %s failed, serving placeholder: %s", symbol, exc)
        return placeholder_details(symbol)
