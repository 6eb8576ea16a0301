"""Unit tests for SearchSession teardown with a scripted websocket."""

import asyncio
import logging

import pytest
from fastapi import WebSocketDisconnect

from tickerboard.services.search_session import SearchSession
from tickerboard.services.symbol_search import SearchOptions
from tests.helpers import RecordingProvider, results

pytestmark = pytest.mark.asyncio(loop_scope="function")


class ScriptedWebSocket:
    """Replays client messages; a delay is awaited, an exception is raised."""

    def __init__(self, script, send_error: Exception | None = None):
        self._script = list(script)
        self._send_error = send_error
        self.sent: list[dict] = []

    async def receive_json(self):
        item = self._script.pop(0)
        if isinstance(item, float):
            await asyncio.sleep(item)
            item = self._script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def send_json(self, message):
        if self._send_error is not None:
            raise self._send_error
        self.sent.append(message)


async def test_disconnect_unmounts_widget():
    ws = ScriptedWebSocket([{"type": "focus"}, 0.01, WebSocketDisconnect(1000)])
    session = SearchSession(ws, RecordingProvider(results("AAPL")), SearchOptions(debounce_ms=10))

    await session.run()

    assert not session.widget.mounted
    assert ws.sent[-1]["has_focus"] is True


async def test_failed_sender_is_reaped_and_logged(caplog):
    ws = ScriptedWebSocket([0.01, WebSocketDisconnect(1000)], send_error=RuntimeError("socket gone"))
    session = SearchSession(ws, RecordingProvider(), SearchOptions(debounce_ms=10))

    with caplog.at_level(logging.ERROR, logger="tickerboard.services.search_session"):
        await session.run()

    assert "Search session sender failed" in caplog.text
    assert "socket gone" in caplog.text
