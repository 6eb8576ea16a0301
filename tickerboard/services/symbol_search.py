"""Symbol search widget — debounced autocomplete over a pluggable provider.

The widget owns its SearchState. Hosts drive it with UI events (``input``,
``key``, ``click``, ``pointer_down``) and observe it through ``on_change``
snapshots and the ``on_symbol_select`` callback.

Searches are sequenced by a generation counter: each debounce fire issues a
new generation, and a completion is applied only if its generation is still
the latest. New input, selecting, escaping and unmounting also bump the
generation, so a slow response can never resurrect a closed panel.
"""

import asyncio
import enum
import inspect
import logging
from dataclasses import dataclass, replace
from typing import Awaitable, Callable

from tickerboard.services.errors import ConfigurationError, ProviderError
from tickerboard.services.pointer_events import PointerEvents, Region
from tickerboard.services.search_providers.base import SearchProvider, SearchResult

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Search failed"


class Phase(str, enum.Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    SEARCHING = "searching"
    RESULTS = "results"
    EMPTY = "empty"
    ERROR = "error"


class Key(str, enum.Enum):
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ENTER = "Enter"
    ESCAPE = "Escape"


@dataclass(frozen=True)
class SearchOptions:
    placeholder: str = "Search stocks, ETFs, mutual funds, bonds..."
    disabled: bool = False
    min_query_length: int = 2
    debounce_ms: int = 300
    result_limit: int = 10
    # Enter with nothing highlighted selects the raw query as a symbol
    enter_selects_raw_query: bool = True

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


@dataclass(frozen=True)
class SearchState:
    query: str = ""
    results: tuple[SearchResult, ...] = ()
    is_loading: bool = False
    is_open: bool = False
    selection_index: int = -1
    error: str | None = None
    has_focus: bool = False
    phase: Phase = Phase.IDLE

    @property
    def highlighted(self) -> SearchResult | None:
        if 0 <= self.selection_index < len(self.results):
            return self.results[self.selection_index]
        return None

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "results": [r.to_dict() for r in self.results],
            "is_loading": self.is_loading,
            "is_open": self.is_open,
            "selection_index": self.selection_index,
            "error": self.error,
            "has_focus": self.has_focus,
            "phase": self.phase.value,
        }


SelectCallback = Callable[[SearchResult], Awaitable[None] | None]
ChangeListener = Callable[[SearchState], None]


class SymbolSearchWidget:
    """Interactive autocomplete control for ticker symbols.

    Must be driven from a running event loop: the debounce timer is an
    ``asyncio.TimerHandle`` owned by the instance and searches run as tasks.
    """

    def __init__(
        self,
        provider: SearchProvider,
        on_symbol_select: SelectCallback,
        *,
        options: SearchOptions | None = None,
        pointer_events: PointerEvents | None = None,
        on_change: ChangeListener | None = None,
    ):
        if on_symbol_select is None:
            raise ValueError("on_symbol_select callback is required")
        self.provider = provider
        self.options = options or SearchOptions()
        self.input_region = Region("search-input")
        self.panel_region = Region("search-panel")
        self._on_symbol_select = on_symbol_select
        self._on_change = on_change
        self._pointer_events = pointer_events or PointerEvents()
        self._state = SearchState()
        self._timer: asyncio.TimerHandle | None = None
        self._generation = 0
        self._inflight: set[asyncio.Task] = set()
        self._callbacks: set[asyncio.Task] = set()
        self._mounted = False
        self._selected = False

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def debounce_pending(self) -> bool:
        return self._timer is not None

    # -- lifecycle ---------------------------------------------------------

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        self._pointer_events.add_listener(self.pointer_down)
        self._update()

    def unmount(self) -> None:
        """Cancel the pending debounce, in-flight searches and select callbacks; detach listeners."""
        if not self._mounted:
            return
        self._mounted = False
        self._cancel_timer()
        self._generation += 1
        for task in list(self._inflight):
            task.cancel()
        for task in list(self._callbacks):
            task.cancel()
        self._pointer_events.remove_listener(self.pointer_down)
        self._state = SearchState()

    async def settle(self) -> None:
        """Wait until no debounce is pending and every issued search has finished."""
        loop = asyncio.get_running_loop()
        while self._timer is not None or self._inflight:
            if self._timer is not None:
                await asyncio.sleep(max(0.0, self._timer.when() - loop.time()))
            if self._inflight:
                await asyncio.gather(*self._inflight, return_exceptions=True)
            await asyncio.sleep(0)

    # -- events ------------------------------------------------------------

    def focus(self) -> None:
        if self._accepts_events():
            self._update(has_focus=True)

    def input(self, text: str) -> None:
        """Replace the query and restart the debounce window."""
        if not self._accepts_events():
            return
        query = text.upper()
        self._selected = False
        self._cancel_timer()

        # Any new keystroke supersedes the search already in flight
        self._invalidate()
        if len(query.strip()) < self.options.min_query_length:
            self._update(
                query=query, results=(), is_open=False, selection_index=-1,
                error=None, has_focus=True, phase=Phase.IDLE,
            )
            return

        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.options.debounce_seconds, self._fire, query)
        self._update(query=query, error=None, has_focus=True, phase=Phase.DEBOUNCING)

    def key(self, key: str) -> None:
        if not self._accepts_events():
            return
        try:
            key = Key(key)
        except ValueError:
            return

        state = self._state
        count = len(state.results)
        if key is Key.ARROW_DOWN:
            if state.is_open and count:
                self._update(selection_index=(state.selection_index + 1) % count)
        elif key is Key.ARROW_UP:
            if state.is_open and count:
                index = count - 1 if state.selection_index <= 0 else state.selection_index - 1
                self._update(selection_index=index)
        elif key is Key.ENTER:
            if state.is_open and state.highlighted is not None:
                self.select(state.highlighted)
            elif self.options.enter_selects_raw_query and state.query.strip():
                self.select(SearchResult.from_query(state.query))
        elif key is Key.ESCAPE:
            self._cancel_timer()
            self._invalidate()
            self._update(
                results=(), is_open=False, selection_index=-1, has_focus=False, phase=Phase.IDLE,
            )

    def click(self, index: int) -> None:
        """Pointer selection of a visible result."""
        if not self._accepts_events():
            return
        state = self._state
        if state.is_open and 0 <= index < len(state.results):
            self.select(state.results[index])

    def pointer_down(self, target: object) -> None:
        """Document pointer listener: close the panel when the pointer lands elsewhere."""
        if not self._mounted:
            return
        if target is self.input_region or target is self.panel_region:
            return
        state = self._state
        if state.is_open or state.selection_index != -1 or state.has_focus:
            self._update(is_open=False, selection_index=-1, has_focus=False)

    def select(self, result: SearchResult) -> None:
        """Hand ``result`` to the host and end the search session.

        Ignored when the session already produced a selection, so the host
        callback runs at most once until the next input.
        """
        if not self._mounted or self._selected or not result.symbol.strip():
            return
        self._selected = True
        self._cancel_timer()
        self._invalidate()
        try:
            outcome = self._on_symbol_select(result)
        finally:
            self._update(
                query="", results=(), is_open=False, selection_index=-1, error=None, phase=Phase.IDLE,
            )
        if inspect.isawaitable(outcome):
            task = asyncio.ensure_future(outcome)
            self._callbacks.add(task)
            task.add_done_callback(self._callback_done)

    # -- internals ---------------------------------------------------------

    def _accepts_events(self) -> bool:
        return self._mounted and not self.options.disabled

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _invalidate(self) -> None:
        """Supersede every issued search without issuing a new one."""
        self._generation += 1
        if self._state.is_loading:
            self._state = replace(self._state, is_loading=False)

    def _fire(self, query: str) -> None:
        self._timer = None
        self._generation += 1
        self._update(is_loading=True, phase=Phase.SEARCHING)
        task = asyncio.ensure_future(self._run_search(self._generation, query))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run_search(self, generation: int, query: str) -> None:
        changes: dict = {}
        try:
            found = await self.provider.search(query.strip())
            results = tuple(found[: self.options.result_limit])
            changes = {
                "results": results,
                "is_open": bool(results),
                "selection_index": -1,
                "error": None,
                "phase": Phase.RESULTS if results else Phase.EMPTY,
            }
        except ConfigurationError as exc:
            logger.warning("Symbol search is not configured: %s", exc)
            changes = self._failure(f"Search is not configured: {exc}")
        except ProviderError as exc:
            logger.warning("Symbol search for %r failed: %s", query, exc)
            changes = self._failure(SEARCH_FAILED_MESSAGE)
        except Exception:
            logger.exception("Unexpected error searching for %r", query)
            changes = self._failure(SEARCH_FAILED_MESSAGE)
        finally:
            if generation == self._generation:
                self._update(is_loading=False, **changes)
            else:
                logger.debug("Discarding stale search response for %r", query)

    @staticmethod
    def _failure(message: str) -> dict:
        return {
            "results": (),
            "is_open": False,
            "selection_index": -1,
            "error": message,
            "phase": Phase.ERROR,
        }

    def _callback_done(self, task: asyncio.Task) -> None:
        self._callbacks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Symbol select callback failed", exc_info=task.exception())

    def _update(self, **changes) -> None:
        if changes:
            self._state = replace(self._state, **changes)
        if self._on_change is not None:
            self._on_change(self._state)
