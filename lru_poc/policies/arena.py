# lru_poc/policies/arena.py
import numpy as np

from ..errors import ArenaEmptyError, ArenaFullError

NIL = -1


class RecencyArena:
    """
    Doubly-linked recency list stored in flat, pre-allocated arrays.

    Slots are addressed by integer index; `prev`/`next` hold indices
    (NIL = none), so there are no node objects and no reference cycles.
    Head is the most recently used slot, tail the least.
    Freed slots are recycled through an explicit free list.
    """
    def __init__(self, capacity: int):
        self.capacity = capacity
        self.prev   = np.full(capacity, NIL, dtype=np.int64)
        self.next   = np.full(capacity, NIL, dtype=np.int64)
        self.keys   = [None] * capacity
        self.values = [None] * capacity
        self.free   = list(range(capacity - 1, -1, -1))   # pop() -> slot 0 first
        self.head   = NIL
        self.tail   = NIL
        self.count  = 0

    def __len__(self) -> int:
        return self.count

    # ----------------------------------------------------------
    def _link_front(self, slot: int) -> None:
        self.prev[slot] = NIL
        self.next[slot] = self.head
        if self.head != NIL:
            self.prev[self.head] = slot
        self.head = slot
        if self.tail == NIL:
            self.tail = slot

    def unlink(self, slot: int) -> None:
        p, n = int(self.prev[slot]), int(self.next[slot])
        if p != NIL:
            self.next[p] = n
        else:
            self.head = n
        if n != NIL:
            self.prev[n] = p
        else:
            self.tail = p
        self.prev[slot] = self.next[slot] = NIL

    def push_front(self, key, value) -> int:
        if not self.free:
            raise ArenaFullError(f"all {self.capacity} slots in use")
        slot = self.free.pop()
        self.keys[slot]   = key
        self.values[slot] = value
        self._link_front(slot)
        self.count += 1
        return slot

    def move_to_front(self, slot: int) -> None:
        if slot == self.head:
            return
        self.unlink(slot)
        self._link_front(slot)

    def release(self, slot: int) -> None:
        self.keys[slot] = self.values[slot] = None
        self.free.append(slot)
        self.count -= 1

    def pop_back(self):
        """Unlink and free the LRU slot; return its (key, value)."""
        if self.tail == NIL:
            raise ArenaEmptyError("pop_back on empty arena")
        slot  = self.tail
        entry = (self.keys[slot], self.values[slot])
        self.unlink(slot)
        self.release(slot)
        return entry

    def iter_slots(self):
        slot = self.head
        while slot != NIL:
            yield slot
            slot = int(self.next[slot])

    def reset(self) -> None:
        self.prev.fill(NIL)
        self.next.fill(NIL)
        self.keys   = [None] * self.capacity
        self.values = [None] * self.capacity
        self.free   = list(range(self.capacity - 1, -1, -1))
        self.head   = self.tail = NIL
        self.count  = 0
