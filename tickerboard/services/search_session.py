"""WebSocket bridge that drives one SymbolSearchWidget per connection."""

import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from tickerboard.config import settings
from tickerboard.services.details_service import get_stock_details
from tickerboard.services.pointer_events import OUTSIDE, PointerEvents
from tickerboard.services.search_providers import SearchProvider, SearchResult
from tickerboard.services.symbol_search import SearchOptions, SearchState, SymbolSearchWidget

logger = logging.getLogger(__name__)


def options_from_settings() -> SearchOptions:
    return SearchOptions(
        min_query_length=settings.search_min_query_length,
        debounce_ms=settings.search_debounce_ms,
        result_limit=settings.search_result_limit,
        enter_selects_raw_query=settings.search_enter_selects_raw_query,
    )


class SearchSession:
    """Translate client messages into widget events and push state back.

    Client messages::

        {"type": "input", "value": "AAP"}
        {"type": "key", "key": "ArrowDown"}
        {"type": "click", "index": 0}
        {"type": "pointer", "target": "input" | "panel" | "outside"}
        {"type": "focus"}

    Server messages are ``state`` snapshots, a ``select`` event per selection
    followed by the ``details`` payload for the selected symbol, and ``error``
    for malformed client messages.
    """

    def __init__(self, websocket: WebSocket, provider: SearchProvider, options: SearchOptions | None = None):
        self._ws = websocket
        self._outbox: asyncio.Queue[dict] = asyncio.Queue()
        self._pointer_events = PointerEvents()
        self.widget = SymbolSearchWidget(
            provider,
            self._on_symbol_select,
            options=options or options_from_settings(),
            pointer_events=self._pointer_events,
            on_change=self._push_state,
        )

    def _push_state(self, state: SearchState) -> None:
        self._outbox.put_nowait({"type": "state", **state.to_dict()})

    async def _on_symbol_select(self, result: SearchResult) -> None:
        self._outbox.put_nowait({"type": "select", "result": result.to_dict()})
        details = await get_stock_details(result.symbol)
        self._outbox.put_nowait({"type": "details", **details})

    def _resolve_target(self, name: str | None) -> object:
        if name == "input":
            return self.widget.input_region
        if name == "panel":
            return self.widget.panel_region
        return OUTSIDE

    def handle_message(self, message: dict) -> None:
        kind = message.get("type") if isinstance(message, dict) else None
        if kind == "input":
            self.widget.input(str(message.get("value", "")))
        elif kind == "key":
            self.widget.key(str(message.get("key", "")))
        elif kind == "click":
            index = message.get("index")
            if isinstance(index, int):
                self.widget.click(index)
            else:
                self._outbox.put_nowait({"type": "error", "detail": "click requires an integer index"})
        elif kind == "pointer":
            self._pointer_events.dispatch(self._resolve_target(message.get("target")))
        elif kind == "focus":
            self.widget.focus()
        else:
            self._outbox.put_nowait({"type": "error", "detail": f"Unknown message type: {kind!r}"})

    async def _sender(self) -> None:
        while True:
            message = await self._outbox.get()
            await self._ws.send_json(message)

    async def run(self) -> None:
        self.widget.mount()
        sender = asyncio.create_task(self._sender())
        try:
            while True:
                try:
                    message = await self._ws.receive_json()
                except ValueError:
                    self._outbox.put_nowait({"type": "error", "detail": "Malformed message"})
                    continue
                self.handle_message(message)
        except WebSocketDisconnect:
            logger.info("Search session closed by client")
        finally:
            self.widget.unmount()
            sender.cancel()
            try:
                await sender
            except asyncio.CancelledError:
                pass
            except Exception:
                logger.exception("Search session sender failed")
