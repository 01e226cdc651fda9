# lru_poc/policies/locked.py
import threading


class LockedLRU:
    """
    Serialise every call on an inner policy with a single mutex.
    No internal concurrency; each call runs to completion under the lock.
    """
    def __init__(self, inner):
        self.inner = inner
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self.inner.capacity

    @property
    def stats(self):
        with self._lock:
            return self.inner.stats

    def get(self, key, default=None):
        with self._lock:
            return self.inner.get(key, default)

    def peek(self, key, default=None):
        with self._lock:
            return self.inner.peek(key, default)

    def put(self, key, value) -> None:
        with self._lock:
            self.inner.put(key, value)

    def request(self, key, size: int = 1) -> bool:
        with self._lock:
            return self.inner.request(key, size)

    def clear(self) -> None:
        with self._lock:
            self.inner.clear()

    def keys(self) -> list:
        # snapshot; a live generator would escape the lock
        with self._lock:
            return list(self.inner.keys())

    def items(self) -> list:
        with self._lock:
            return list(self.inner.items())

    def __iter__(self):
        return iter(self.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self.inner)

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self.inner
