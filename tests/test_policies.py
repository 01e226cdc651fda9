"""
Tests for the OrderedDict baseline and the locked wrapper.
"""
import threading

import pytest

from lru_poc import CapacityError, LockedLRU, LRUCache, OrderedLRU


class TestOrderedLRU:

    def test_capacity_two_sequence(self):
        cache = OrderedLRU(2)
        cache.put(1, 1)
        cache.put(2, 2)
        assert cache.get(1) == 1
        cache.put(3, 3)
        assert cache.get(2) is None
        cache.put(4, 4)
        assert cache.get(1) is None
        assert cache.get(3) == 3
        assert cache.get(4) == 4
        assert cache.stats.evictions == 2

    def test_rejects_zero_capacity(self):
        with pytest.raises(CapacityError):
            OrderedLRU(0)

    def test_keys_mru_first(self):
        cache = OrderedLRU(3)
        for k in "abc":
            cache.put(k, k)
        cache.get("a")
        assert list(cache.keys()) == ["a", "c", "b"]


class TestLockedLRU:

    def test_delegates(self):
        cache = LockedLRU(LRUCache(2))
        cache.put("a", 1)
        assert cache.get("a") == 1
        assert cache.peek("a") == 1
        assert "a" in cache
        assert len(cache) == 1
        assert cache.keys() == ["a"]
        assert cache.capacity == 2
        assert cache.request("b") is False
        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize("policy", [LRUCache, OrderedLRU])
    def test_iter_and_items_are_snapshots(self, policy):
        cache = LockedLRU(policy(3))
        for k in "abc":
            cache.put(k, k.upper())
        assert list(cache) == ["c", "b", "a"]
        assert cache.items() == [("c", "C"), ("b", "B"), ("a", "A")]
        for k in cache:
            cache.get(k)
        assert cache.keys() == ["a", "b", "c"]

    def test_concurrent_puts_keep_invariant(self):
        """Many threads hammering one cache never overflow it."""
        cache = LockedLRU(LRUCache(16))
        errors = []

        def worker(tid):
            for i in range(500):
                cache.put((tid, i % 40), i)
                cache.get((tid, (i * 7) % 40))
                if len(cache) > 16:
                    errors.append(len(cache))

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert len(cache) == 16
        assert len(set(cache.keys())) == 16
