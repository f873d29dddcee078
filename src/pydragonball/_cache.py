"""Query cache for fetched catalog pages.

Results are keyed by ``(domain, page, search term)``. Alongside the entries
the cache keeps a set of "ever loaded" flags (one per domain plus the
aggregate ``"stats"`` flag).
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any

_logger = logging.getLogger(__name__)


class QueryCache:
    """Keyed store of item lists.

    Unbounded by default. When *max_entries* is given the least recently
    used entry is evicted once the bound is exceeded; loaded flags are never
    evicted.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        self._entries: OrderedDict[str, list[Any]] = OrderedDict()
        self._loaded: set[str] = set()
        self._max_entries = max_entries

    @staticmethod
    def key(domain: str, page: int, search_term: str = "") -> str:
        """Build the cache key for a query.

        Domain names never contain ``-`` and the page is an integer, so the
        search term is always the unambiguous trailing component.
        """
        return f"{domain}-{page}-{search_term}"

    def get(self, key: str) -> list[Any] | None:
        items = self._entries.get(key)
        if items is None:
            return None
        if self._max_entries is not None:
            self._entries.move_to_end(key)
        return list(items)

    def set(self, key: str, items: list[Any]) -> None:
        self._entries[key] = list(items)
        self._entries.move_to_end(key)
        if self._max_entries is not None:
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                _logger.debug("Evicted cache entry %s", evicted)

    def has(self, key: str) -> bool:
        return key in self._entries

    def set_loaded(self, name: str) -> None:
        self._loaded.add(str(name))

    def is_loaded(self, name: str) -> bool:
        return str(name) in self._loaded

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
