import threading
from typing import Any


class LastGoodCache:
    """Last successfully built view per (kind, slug, locale).

    Served only when the database is failing; a fresh successful lookup always
    replaces the entry.
    """

    def __init__(self, max_entries: int = 512):
        self.max_entries = max_entries
        self._entries: dict[tuple[str, str, str], dict[str, Any]] = {}
        self._lock = threading.Lock()

    def put(self, kind: str, slug: str, locale: str, view: dict[str, Any]) -> None:
        key = (kind, slug, locale)
        with self._lock:
            self._entries.pop(key, None)
            if len(self._entries) >= self.max_entries:
                # dicts keep insertion order: drop the oldest entry
                self._entries.pop(next(iter(self._entries)))
            self._entries[key] = view

    def discard(self, kind: str, slug: str, locale: str) -> None:
        with self._lock:
            self._entries.pop((kind, slug, locale), None)

    def get(self, kind: str, slug: str, locale: str) -> dict[str, Any] | None:
        with self._lock:
            return self._entries.get((kind, slug, locale))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


last_good = LastGoodCache()
