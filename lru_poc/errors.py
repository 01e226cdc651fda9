# lru_poc/errors.py


class LRUPocError(Exception):
    """Base class for every error raised by lru_poc."""


class CapacityError(LRUPocError, ValueError):
    """Capacity is not a positive int."""


class TraceFormatError(LRUPocError, ValueError):
    """Trace file has an unknown suffix or lacks the `key` column."""


class ArenaFullError(LRUPocError, IndexError):
    pass


class ArenaEmptyError(LRUPocError, IndexError):
    pass
