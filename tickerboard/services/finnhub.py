"""Finnhub REST calls used by the detail view and market cards."""

from datetime import date, timedelta

import httpx

from tickerboard.services.http import fetch_json

FINNHUB_BASE_URL = "https://finnhub.io/api/v1"
NEWS_LOOKBACK_DAYS = 30


def _sanitize_number(val) -> float:
    """Finnhub reports missing numbers as null; the UI expects zeros."""
    if val is None:
        return 0.0
    try:
        return float(val)
    except (TypeError, ValueError):
        return 0.0


def parse_quote(symbol: str, raw: dict) -> dict:
    """Map Finnhub's single-letter quote keys (c, d, dp, h, l, o, pc) to named fields."""
    return {
        "symbol": symbol,
        "price": _sanitize_number(raw.get("c")),
        "change": _sanitize_number(raw.get("d")),
        "change_percent": _sanitize_number(raw.get("dp")),
        "high": _sanitize_number(raw.get("h")),
        "low": _sanitize_number(raw.get("l")),
        "open": _sanitize_number(raw.get("o")),
        "previous_close": _sanitize_number(raw.get("pc")),
    }


def parse_profile(symbol: str, raw: dict) -> dict:
    return {
        "symbol": raw.get("ticker") or symbol,
        "name": raw.get("name") or symbol,
        "exchange": raw.get("exchange"),
        "industry": raw.get("finnhubIndustry"),
        "country": raw.get("country"),
        "currency": raw.get("currency"),
        "ipo": raw.get("ipo"),
        "logo": raw.get("logo"),
        "weburl": raw.get("weburl"),
        # Finnhub reports market cap in millions
        "market_cap": _sanitize_number(raw.get("marketCapitalization")) * 1_000_000,
    }


def parse_news(raw: list) -> list[dict]:
    items = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("headline"):
            continue
        items.append({
            "headline": item["headline"],
            "source": item.get("source") or "",
            "summary": item.get("summary") or "",
            "url": item.get("url") or "",
            "image": item.get("image") or None,
            "published_at": int(item.get("datetime") or 0),
        })
    return items


async def fetch_quote(client: httpx.AsyncClient, symbol: str, token: str) -> dict:
    raw = await fetch_json(
        client, f"{FINNHUB_BASE_URL}/quote", {"symbol": symbol, "token": token}, provider="Finnhub",
    )
    return parse_quote(symbol, raw if isinstance(raw, dict) else {})


async def fetch_profile(client: httpx.AsyncClient, symbol: str, token: str) -> dict:
    raw = await fetch_json(
        client, f"{FINNHUB_BASE_URL}/stock/profile2", {"symbol": symbol, "token": token}, provider="Finnhub",
    )
    return parse_profile(symbol, raw if isinstance(raw, dict) else {})


async def fetch_news(client: httpx.AsyncClient, symbol: str, token: str, today: date | None = None) -> list[dict]:
    """Company news for the last NEWS_LOOKBACK_DAYS days, newest first as Finnhub returns it."""
    today = today or date.today()
    params = {
        "symbol": symbol,
        "from": (today - timedelta(days=NEWS_LOOKBACK_DAYS)).isoformat(),
        "to": today.isoformat(),
        "token": token,
    }
    raw = await fetch_json(client, f"{FINNHUB_BASE_URL}/company-news", params, provider="Finnhub")
    return parse_news(raw if isinstance(raw, list) else [])
