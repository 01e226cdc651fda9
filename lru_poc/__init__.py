from .errors import (ArenaEmptyError, ArenaFullError, CapacityError,
                     LRUPocError, TraceFormatError)
from .policies import CacheStats, LockedLRU, LRUCache, OrderedLRU

__all__ = [
    "LRUCache", "OrderedLRU", "LockedLRU", "CacheStats",
    "LRUPocError", "CapacityError", "TraceFormatError",
    "ArenaFullError", "ArenaEmptyError",
]
__version__ = "0.1.0"
