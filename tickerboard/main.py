import logging
from contextlib import asynccontextmanager
from datetime import datetime

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from fastapi import FastAPI

from tickerboard.config import settings as app_settings
from tickerboard.routers import market, search, stocks
from tickerboard.services.market_service import refresh_market_data

logger = logging.getLogger(__name__)
scheduler = AsyncIOScheduler()


async def scheduled_market_refresh():
    """Background job: refresh the index cards."""
    try:
        cards = await refresh_market_data()
        logger.info(f"Refreshed {len(cards)} market cards")
    except Exception:
        logger.exception("Scheduled market refresh failed")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # First run immediately so the grid is warm before the first request
    scheduler.add_job(
        scheduled_market_refresh,
        IntervalTrigger(seconds=app_settings.market_refresh_seconds),
        id="market_refresh",
        next_run_time=datetime.now(),
        replace_existing=True,
    )
    scheduler.start()
    logger.info(f"Scheduler started, market refresh every {app_settings.market_refresh_seconds}s")

    yield

    scheduler.shutdown(wait=False)


app = FastAPI(
    title="Tickerboard",
    summary="Stock and index dashboard with debounced symbol search.",
    description=(
        "Tickerboard polls a market-data provider for a grid of index/fund cards and serves "
        "a detail view (quote, company profile, recent news) for any symbol.\n\n"
        "**Key concepts:**\n"
        "- Symbol search is pluggable: Alpha Vantage, Finnhub or an offline mock catalogue, "
        "all normalized to one result shape.\n"
        "- The `/api/search/session` WebSocket drives a server-side autocomplete widget "
        "(debounce, keyboard navigation, outside-click handling, stale-response discarding).\n"
        "- Without a Finnhub key, market cards fall back to bundled mock data and detail "
        "views to a zeroed placeholder.\n"
    ),
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "market", "description": "Index/fund cards for the dashboard grid, refreshed on an interval."},
        {"name": "stocks", "description": "Per-symbol detail view: quote, company profile and recent news."},
        {"name": "search", "description": "Symbol search, one-shot over REST or interactive over WebSocket."},
        {"name": "system", "description": "Health checks and operational endpoints."},
    ],
)

app.include_router(market.router)
app.include_router(stocks.router)
app.include_router(search.router)


@app.get("/api/health", summary="Health check", tags=["system"])
async def health():
    """Return `{\"status\": \"ok\"}` when the service is running."""
    return {"status": "ok"}
