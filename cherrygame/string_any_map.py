"""A thread-safe map from string keys to arbitrary values."""

from __future__ import annotations

import json
import threading
from collections.abc import Sized
from typing import Any, Callable, Iterable, Iterator


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex, str, bytes, Sized)):
        return not value
    return False


class StringAnyMap:
    """A string-keyed map whose operations are guarded by a lock.

    The dictionary given to the constructor becomes the underlying store
    without being copied.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, Any] = data if data is not None else {}

    def iterator(self, f: Callable[[str, Any], bool]) -> None:
        """Call ``f(key, value)`` for each entry until it returns False."""
        with self._lock:
            for k, v in list(self._data.items()):
                if not f(k, v):
                    break

    def clone(self) -> StringAnyMap:
        """Return a new map holding a shallow copy of the data."""
        return StringAnyMap(self.map_copy())

    def map(self) -> dict[str, Any]:
        """Return a copy of the underlying data."""
        return self.map_copy()

    def map_copy(self) -> dict[str, Any]:
        """Return a shallow copy of the underlying data."""
        with self._lock:
            return dict(self._data)

    def filter_empty(self) -> None:
        """Delete entries whose value is empty: None, 0, False, "" or an empty container."""
        with self._lock:
            for k in [k for k, v in self._data.items() if _is_empty(v)]:
                del self._data[k]

    def filter_nil(self) -> None:
        """Delete entries whose value is None."""
        with self._lock:
            for k in [k for k, v in self._data.items() if v is None]:
                del self._data[k]

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        with self._lock:
            self._data[key] = value

    def sets(self, data: dict[str, Any]) -> None:
        """Store every entry of ``data``."""
        with self._lock:
            self._data.update(data)

    def search(self, key: str) -> tuple[Any, bool]:
        """Return ``(value, found)`` for ``key``."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def get(self, key: str) -> Any:
        """Return the value under ``key`` or None."""
        with self._lock:
            return self._data.get(key)

    def pop(self) -> tuple[str, Any]:
        """Remove and return one entry; ``("", None)`` when the map is empty."""
        with self._lock:
            for key in self._data:
                return key, self._data.pop(key)
            return "", None

    def pops(self, size: int) -> dict[str, Any]:
        """Remove and return up to ``size`` entries; all of them when ``size`` is -1."""
        with self._lock:
            if size == -1 or size > len(self._data):
                size = len(self._data)
            if size <= 0:
                return {}
            taken = list(self._data)[:size]
            return {k: self._data.pop(k) for k in taken}

    def _set_with_lock_check(self, key: str, value: Any, factory: Callable[[], Any] | None = None) -> Any:
        with self._lock:
            if key in self._data:
                return self._data[key]
            if factory is not None:
                value = factory()
            if value is not None:
                self._data[key] = value
            return value

    def get_or_set(self, key: str, value: Any) -> Any:
        """Return the value under ``key``, storing ``value`` first if absent."""
        found_value, found = self.search(key)
        if found:
            return found_value
        return self._set_with_lock_check(key, value)

    def get_or_set_func(self, key: str, f: Callable[[], Any]) -> Any:
        """Like :meth:`get_or_set`, with the value produced by ``f()`` outside the lock."""
        found_value, found = self.search(key)
        if found:
            return found_value
        return self._set_with_lock_check(key, f())

    def get_or_set_func_lock(self, key: str, f: Callable[[], Any]) -> Any:
        """Like :meth:`get_or_set_func`, but ``f`` runs while the lock is held."""
        found_value, found = self.search(key)
        if found:
            return found_value
        return self._set_with_lock_check(key, None, f)

    def set_if_not_exist(self, key: str, value: Any) -> bool:
        """Store ``value`` if ``key`` is absent; return whether it was absent."""
        if self.contains(key):
            return False
        self._set_with_lock_check(key, value)
        return True

    def set_if_not_exist_func(self, key: str, f: Callable[[], Any]) -> bool:
        """Store ``f()`` if ``key`` is absent; return whether it was absent."""
        if self.contains(key):
            return False
        self._set_with_lock_check(key, f())
        return True

    def set_if_not_exist_func_lock(self, key: str, f: Callable[[], Any]) -> bool:
        """Like :meth:`set_if_not_exist_func`, but ``f`` runs while the lock is held."""
        if self.contains(key):
            return False
        self._set_with_lock_check(key, None, f)
        return True

    def removes(self, keys: Iterable[str]) -> None:
        """Delete every key in ``keys``."""
        with self._lock:
            for key in keys:
                self._data.pop(key, None)

    def remove(self, key: str) -> Any:
        """Delete ``key`` and return its value, or None if absent."""
        with self._lock:
            return self._data.pop(key, None)

    def keys(self) -> list[str]:
        """Return a snapshot of the keys."""
        with self._lock:
            return list(self._data)

    def values(self) -> list[Any]:
        """Return a snapshot of the values."""
        with self._lock:
            return list(self._data.values())

    def contains(self, key: str) -> bool:
        """Return True if ``key`` is present."""
        with self._lock:
            return key in self._data

    def size(self) -> int:
        """Return the number of entries."""
        with self._lock:
            return len(self._data)

    def is_empty(self) -> bool:
        """Return True when the map holds no entries."""
        return self.size() == 0

    def clear(self) -> None:
        """Remove every entry, starting a fresh underlying dictionary."""
        with self._lock:
            self._data = {}

    def replace(self, data: dict[str, Any]) -> None:
        """Make ``data`` the underlying dictionary."""
        with self._lock:
            self._data = data

    def lock_func(self, f: Callable[[dict[str, Any]], Any]) -> None:
        """Call ``f`` with the underlying dictionary while holding the write lock."""
        with self._lock:
            f(self._data)

    def rlock_func(self, f: Callable[[dict[str, Any]], Any]) -> None:
        """Call ``f`` with the underlying dictionary while holding the lock for reading."""
        with self._lock:
            f(self._data)

    def merge(self, other: StringAnyMap) -> None:
        """Copy every entry of ``other`` into this map."""
        incoming = other.map_copy()
        with self._lock:
            self._data.update(incoming)

    def marshal_json(self) -> bytes:
        """Return the map encoded as a JSON object."""
        with self._lock:
            return json.dumps(self._data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    def unmarshal_json(self, data: bytes | str) -> None:
        """Decode a JSON object and merge its entries into the map.

        Raises ValueError when ``data`` is not valid JSON or not an object.
        """
        decoded = json.loads(data)
        with self._lock:
            if decoded is None:
                self._data = {}
                return
            if not isinstance(decoded, dict):
                raise ValueError("JSON value is not an object")
            self._data.update(decoded)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __str__(self) -> str:
        try:
            return self.marshal_json().decode("utf-8")
        except (TypeError, ValueError):
            return ""

    def __repr__(self) -> str:
        return f"StringAnyMap({self.map_copy()!r})"