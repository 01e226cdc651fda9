# lru_poc/policies/lru.py
import logging

from .arena import RecencyArena
from .base import BasePolicy

logger = logging.getLogger(__name__)


class LRUCache(BasePolicy):
    """
    Classic Least-Recently-Used cache with a fixed entry capacity.

    Keys map to slots of a RecencyArena, so "move to front" and
    "evict from back" are index relinks: get/put are O(1).

    NOTE: get() is a read with a write side effect. A hit moves the key
    to the most-recently-used position. Use peek() or `in` to look
    without touching recency.
    """
    def __init__(self, capacity: int):
        super().__init__(capacity)
        self._slots = {}                          # key -> arena slot
        self._arena = RecencyArena(self._capacity)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key) -> bool:
        return key in self._slots

    def __iter__(self):
        return self.keys()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(capacity={self._capacity}, "
                f"size={len(self)})")

    # ----------------------------------------------------------
    def get(self, key, default=None):
        """
        Return the value for `key` and mark it most recently used.
        On a miss return `default`; nothing changes.
        """
        slot = self._slots.get(key)
        if slot is None:
            self._misses += 1
            return default
        self._hits += 1
        self._arena.move_to_front(slot)
        return self._arena.values[slot]

    def peek(self, key, default=None):
        slot = self._slots.get(key)
        return default if slot is None else self._arena.values[slot]

    def put(self, key, value) -> None:
        """Insert or update `key` as most recently used, evicting the LRU entry if full."""
        slot = self._slots.get(key)
        if slot is not None:
            self._arena.values[slot] = value
            self._arena.move_to_front(slot)
            return

        if len(self._slots) == self._capacity:
            old_key, _ = self._arena.pop_back()
            del self._slots[old_key]
            self._evictions += 1
            logger.debug("evicted %r", old_key)

        self._slots[key] = self._arena.push_front(key, value)

    def clear(self) -> None:
        self._slots.clear()
        self._arena.reset()

    # ----------------------------------------------------------
    def keys(self):
        """Keys from most to least recently used."""
        arena = self._arena
        # snapshot: a get() while iterating relinks the live list
        return iter([arena.keys[s] for s in arena.iter_slots()])

    def items(self):
        arena = self._arena
        return iter([(arena.keys[s], arena.values[s]) for s in arena.iter_slots()])
