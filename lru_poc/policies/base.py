# lru_poc/policies/base.py
import operator
from dataclasses import dataclass

import numpy as np

from ..errors import CapacityError


@dataclass(frozen=True)
class CacheStats:
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_ratio(self) -> float:
        return self.hits / self.requests if self.requests else 0.0


def check_capacity(capacity) -> int:
    # bool is an int subclass; True is not a capacity
    if isinstance(capacity, (bool, np.bool_)):
        raise CapacityError(f"capacity must be an int, got {capacity!r}")
    try:
        capacity = operator.index(capacity)     # accepts numpy integers
    except TypeError:
        raise CapacityError(f"capacity must be an int, got {capacity!r}") from None
    if capacity <= 0:
        raise CapacityError(f"capacity must be > 0, got {capacity}")
    return capacity


class BasePolicy:
    """
    Entry-count bounded cache policy.

    Subclasses implement get/put; request() is what CacheSim drives.
    """
    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)
        self._hits      = 0
        self._misses    = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def stats(self) -> CacheStats:
        return CacheStats(self._hits, self._misses, self._evictions)

    def get(self, key, default=None): ...

    def put(self, key, value) -> None: ...

    def __contains__(self, key) -> bool: ...

    # ----------------------------------------------------------
    def request(self, key, size: int = 1) -> bool:
        """
        Process one trace access.
        Return True on hit, False on miss (after inserting `key`).
        """
        if key in self:
            self.get(key)
            return True
        self._misses += 1
        self.put(key, size)
        return False
