import logging
from typing import Callable

import pandas as pd
from tqdm import tqdm

logger = logging.getLogger(__name__)


def default_key(row):
    return row.key


def iter_requests(df: pd.DataFrame, key_func: Callable = None,
                  progress: bool = False, desc: str = None):
    """Yield (key, size) per trace row; size is the `bytes` column or 1."""
    key_func  = key_func or default_key
    has_bytes = "bytes" in df.columns
    it = df.itertuples(index=False)
    if progress:
        it = tqdm(it, total=len(df), desc=desc)
    for row in it:
        yield key_func(row), (int(row.bytes) if has_bytes else 1)


class CacheSim:
    """
    Replays a trace through a policy object that implements:
      request(key, size=1) -> bool
    """
    def __init__(self, capacity: int, policy_ctor: Callable):
        self.capacity = capacity
        self.policy   = policy_ctor(capacity)

    def replay(self, df: pd.DataFrame, key_func: Callable = None,
               progress: bool = False) -> float:
        if len(df) == 0:
            return 0.0
        hits = 0
        for key, size in iter_requests(df, key_func, progress,
                                       desc=type(self.policy).__name__):
            if self.policy.request(key, size):
                hits += 1
        ratio = hits / len(df)
        logger.debug("%s cap=%d: %d/%d hits (%.3f)",
                     type(self.policy).__name__, self.capacity,
                     hits, len(df), ratio)
        return ratio
