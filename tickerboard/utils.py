"""Shared utilities."""

import time


class TTLCache:
    """Small in-memory cache with per-entry TTL expiration.

    Expired entries are lazily evicted on access. Only used from the event
    loop, so no locking.

    Parameters:
        default_ttl: Time-to-live in seconds for new entries.
        max_size: Maximum number of entries; the oldest entry is evicted when
                  full. 0 means unlimited.
    """

    def __init__(self, default_ttl: float, max_size: int = 0):
        self._data: dict = {}
        self.default_ttl = default_ttl
        self.max_size = max_size

    def get_value(self, key):
        """Return the cached value if present and not expired, else None."""
        entry = self._data.get(key)
        if entry is None:
            return None
        value, ts = entry
        if time.monotonic() - ts > self.default_ttl:
            del self._data[key]
            return None
        return value

    def set_value(self, key, value) -> None:
        if self.max_size and len(self._data) >= self.max_size and key not in self._data:
            oldest = min(self._data, key=lambda k: self._data[k][1])
            del self._data[oldest]
        self._data[key] = (value, time.monotonic())

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
