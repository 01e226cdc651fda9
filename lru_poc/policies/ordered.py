# lru_poc/policies/ordered.py
from collections import OrderedDict

from .base import BasePolicy


class OrderedLRU(BasePolicy):
    """
    LRU on top of OrderedDict (end = most recently used).
    Same contract as LRUCache; kept as a baseline and a test oracle.
    """
    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.cache = OrderedDict()      # key -> value

    def __len__(self) -> int:
        return len(self.cache)

    def __contains__(self, key) -> bool:
        return key in self.cache

    # ----------------------------------------------------------
    def get(self, key, default=None):
        if key not in self.cache:
            self._misses += 1
            return default
        self._hits += 1
        # move to MRU position
        self.cache.move_to_end(key)
        return self.cache[key]

    def peek(self, key, default=None):
        return self.cache.get(key, default)

    def put(self, key, value) -> None:
        if key in self.cache:
            self.cache.move_to_end(key)
        elif len(self.cache) == self._capacity:
            self.cache.popitem(last=False)   # LRU item
            self._evictions += 1
        self.cache[key] = value

    def clear(self) -> None:
        self.cache.clear()

    def keys(self):
        return reversed(self.cache)

    def items(self):
        return reversed(self.cache.items())

    def __iter__(self):
        return self.keys()
