import pytest
from httpx import ASGITransport, AsyncClient

from tickerboard.config import settings
from tickerboard.main import app
from tickerboard.services.market_service import _reset_market_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test offline: no real credentials, mock search, fast debounce."""
    monkeypatch.setattr(settings, "finnhub_api_key", "YOUR_FINNHUB_API_KEY_HERE")
    monkeypatch.setattr(settings, "alphavantage_api_key", "test-key")
    monkeypatch.setattr(settings, "search_provider", "mock")
    monkeypatch.setattr(settings, "search_debounce_ms", 10)
    _reset_market_cache()
    yield
    _reset_market_cache()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
