"""A dictionary wrapper with optional locking."""

from __future__ import annotations

import threading
from contextlib import nullcontext
from typing import Any, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


class Map(Generic[K, V]):
    """A key/value map; when ``safe`` is true every operation holds a lock."""

    def __init__(self, safe: bool = False) -> None:
        self._data: dict[K, V] = {}
        self._safe = safe
        self._lock = threading.RLock() if safe else nullcontext()

    @property
    def safe(self) -> bool:
        """Whether operations are guarded by a lock."""
        return self._safe

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``."""
        with self._lock:
            self._data[key] = value

    def get(self, key: K) -> tuple[V | None, bool]:
        """Return ``(value, True)`` if ``key`` is present, else ``(None, False)``."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def remove(self, key: K) -> tuple[V | None, bool]:
        """Delete ``key``; return the removed value and whether it was present."""
        with self._lock:
            if key in self._data:
                return self._data.pop(key), True
            return None, False

    def size(self) -> int:
        """Return the number of entries."""
        with self._lock:
            return len(self._data)

    def empty(self) -> bool:
        """Return True when the map holds no entries."""
        return self.size() == 0

    def keys(self) -> list[K]:
        """Return a snapshot of the keys."""
        with self._lock:
            return list(self._data)

    def values(self) -> list[V]:
        """Return a snapshot of the values."""
        with self._lock:
            return list(self._data.values())

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._data = {}

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __str__(self) -> str:
        with self._lock:
            items = list(self._data.items())
        try:
            items.sort(key=lambda kv: kv[0])
        except TypeError:
            pass
        body = " ".join(f"{_format_value(k)}:{_format_value(v)}" for k, v in items)
        return f"map[{body}], safe = {_format_value(self._safe)}"

    def __repr__(self) -> str:
        return f"Map({self._data!r}, safe={self._safe!r})"