"""A least-recently-used cache of fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Hashable


class LRUCache:
    """Maps keys to values, evicting the least recently used key when full."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, int] = OrderedDict()

    def get(self, key: Hashable) -> int:
        """Return the value for ``key`` and mark it as used, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest key if the cache is full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) == self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value