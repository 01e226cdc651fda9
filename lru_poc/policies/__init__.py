from .base import BasePolicy, CacheStats
from .locked import LockedLRU
from .lru import LRUCache
from .ordered import OrderedLRU

__all__ = ["BasePolicy", "CacheStats", "LRUCache", "OrderedLRU", "LockedLRU"]
