from fastapi import APIRouter, HTTPException, Query, WebSocket

from tickerboard.schemas.search import SearchProviderInfo, SymbolSearchResponse
from tickerboard.services.errors import ConfigurationError, TransportError
from tickerboard.services.search_providers import get_available_providers, get_search_provider
from tickerboard.services.search_session import SearchSession

router = APIRouter(prefix="/api/search", tags=["search"])


def _provider_or_400(name: str | None):
    try:
        return get_search_provider(name)
    except ValueError as exc:
        raise HTTPException(400, str(exc))


@router.get("", response_model=list[SymbolSearchResponse], summary="Search ticker symbols")
async def search_symbols(
    q: str = Query(..., min_length=1, max_length=50),
    provider: str | None = Query(None, description="Override the configured search provider"),
):
    """One-shot symbol search through the configured provider, normalized to a common shape."""
    query = q.strip()
    if not query:
        raise HTTPException(422, "Query must not be blank")
    search_provider = _provider_or_400(provider)
    try:
        results = await search_provider.search(query)
    except ConfigurationError as exc:
        raise HTTPException(503, f"Search is not configured: {exc}")
    except TransportError as exc:
        raise HTTPException(502, f"Search failed: {exc}")
    return [r.to_dict() for r in results]


@router.get("/providers", response_model=list[SearchProviderInfo], summary="List search providers")
async def list_providers():
    return list(get_available_providers().values())


@router.websocket("/session")
async def search_session(websocket: WebSocket, provider: str | None = None):
    """Interactive search: one debounced autocomplete widget per connection."""
    try:
        search_provider = get_search_provider(provider)
    except ValueError:
        await websocket.close(code=1008)
        return
    await websocket.accept()
    await SearchSession(websocket, search_provider).run()
