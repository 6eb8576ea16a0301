from fastapi import APIRouter

from tickerboard.schemas.quote import MarketIndexResponse
from tickerboard.services.market_service import get_market_data

router = APIRouter(prefix="/api/market", tags=["market"])


@router.get("", response_model=list[MarketIndexResponse], summary="Index cards for the dashboard grid")
async def list_market_indices():
    """Return the polled index/fund cards (refreshed every `market_refresh_seconds`)."""
    return await get_market_data()
