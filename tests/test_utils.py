"""Tests for shared utilities and the provider error helpers."""

from unittest.mock import patch

import pytest

from tickerboard.services.errors import ConfigurationError, is_configured, require_api_key
from tickerboard.utils import TTLCache


class TestTTLCache:
    def test_returns_value_within_ttl(self):
        cache = TTLCache(default_ttl=30)
        cache.set_value("market", [1, 2])
        assert cache.get_value("market") == [1, 2]

    def test_expired_entry_is_evicted(self):
        cache = TTLCache(default_ttl=30)
        with patch("tickerboard.utils.time.monotonic", return_value=100.0):
            cache.set_value("market", [1])
        with patch("tickerboard.utils.time.monotonic", return_value=131.0):
            assert cache.get_value("market") is None
        assert len(cache) == 0

    def test_max_size_evicts_oldest(self):
        cache = TTLCache(default_ttl=30, max_size=1)
        cache.set_value("a", 1)
        cache.set_value("b", 2)
        assert cache.get_value("a") is None
        assert cache.get_value("b") == 2

    def test_clear(self):
        cache = TTLCache(default_ttl=30)
        cache.set_value("a", 1)
        cache.clear()
        assert len(cache) == 0


@pytest.mark.parametrize("key,expected", [
    ("abc123", True),
    ("  abc123  ", True),
    ("", False),
    (None, False),
    ("YOUR_FINNHUB_API_KEY_HERE", False),
    ("YOUR_API_KEY_HERE", False),
])
def test_is_configured(key, expected):
    assert is_configured(key) is expected


def test_require_api_key_strips():
    assert require_api_key(" abc ", "Finnhub") == "abc"


def test_require_api_key_names_provider():
    with pytest.raises(ConfigurationError, match="Finnhub API key is required"):
        require_api_key(None, "Finnhub")
