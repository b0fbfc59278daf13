"""Bounded list of recent search queries."""

import logging
from typing import Optional

from ..config import settings

logger = logging.getLogger(__name__)


class SearchHistory:
    """Most-recent-first query history with a fixed capacity.

    Owned by the caller and handed to whatever needs it; the search engine
    itself never reads it.
    """

    def __init__(self, capacity: Optional[int] = None, entries: Optional[list[str]] = None):
        self.capacity = capacity if capacity is not None else settings.history_capacity
        if self.capacity < 1:
            raise ValueError(f"history capacity must be at least 1, got {self.capacity}")
        self._entries: list[str] = list(entries or [])[: self.capacity]

    def record(self, query: str) -> bool:
        """Prepend ``query``. Blank and already-known queries are ignored."""
        if not query or not query.strip() or query in self._entries:
            return False
        self._entries = [query, *self._entries[: self.capacity - 1]]
        logger.debug(f"Recorded search {query!r} ({len(self._entries)}/{self.capacity})")
        return True

    def entries(self) -> list[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)
