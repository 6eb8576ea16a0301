from fastapi import APIRouter, Path

from tickerboard.schemas.quote import MarketIndexResponse, StockDetailsResponse
from tickerboard.services.details_service import get_stock_details
from tickerboard.services.market_service import fetch_stock_quote

router = APIRouter(prefix="/api/stocks", tags=["stocks"])


@router.get("/{symbol}", response_model=StockDetailsResponse, summary="Quote, profile and news for a symbol")
async def get_details(symbol: str = Path(..., min_length=1, max_length=20, description="Ticker symbol (e.g. AAPL)")):
    """Fetch quote, company profile and recent news in parallel.

    When the provider is unconfigured or any of the three calls fails, a
    placeholder is returned with `is_placeholder=true` instead of an error.
    """
    return await get_stock_details(symbol)


@router.get("/{symbol}/quote", response_model=MarketIndexResponse, summary="Card-style quote for a symbol")
async def get_quote(symbol: str = Path(..., min_length=1, max_length=20, description="Ticker symbol (e.g. AAPL)")):
    return fetch_stock_quote(symbol)
