"""In-memory cache implementation."""

import threading

from .interfaces import Cache


class MemoryCache(Cache):
    """Dict-backed cache. Entries live until ``clear`` is called."""

    def __init__(self):
        self._data = {}
        self._lock = threading.Lock()

    def get(self, key: str, default=None):
        return self._data.get(key, default)

    def set(self, key: str, value) -> None:
        with self._lock:
            self._data[key] = value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
