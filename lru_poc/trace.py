# lru_poc/trace.py
import logging
import pathlib

import numpy as np
import pandas as pd

from .errors import TraceFormatError

logger = logging.getLogger(__name__)

SUFFIXES = (".csv", ".parquet")


def _suffix(path: pathlib.Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUFFIXES:
        raise TraceFormatError(f"{path}: expected one of {SUFFIXES}")
    return suffix


def load_trace(path) -> pd.DataFrame:
    """
    Read a trace file (.csv or .parquet) with a `key` column.
    An optional `bytes` column is kept; other columns are dropped.
    """
    path = pathlib.Path(path)
    suffix = _suffix(path)
    if not path.exists():
        raise FileNotFoundError(path)

    df = pd.read_csv(path) if suffix == ".csv" else pd.read_parquet(path)
    if "key" not in df.columns:
        raise TraceFormatError(f"{path}: missing 'key' column")

    keep = ["key"] + (["bytes"] if "bytes" in df.columns else [])
    df = df[keep].copy()
    df["key"] = df["key"].astype(str)
    logger.debug("loaded %d requests from %s", len(df), path)
    return df


def save_trace(df: pd.DataFrame, path) -> pathlib.Path:
    path = pathlib.Path(path)
    if _suffix(path) == ".csv":
        df.to_csv(path, index=False)
    else:
        df.to_parquet(path, compression="zstd")
    return path


def zipf_trace(n_requests: int, n_keys: int, alpha: float = 1.1,
               seed: int = 0) -> pd.DataFrame:
    """
    Synthetic trace: key ranks drawn from a Zipf law truncated to n_keys.
    P(rank r) ~ 1 / r**alpha. Same seed -> same trace.
    """
    if n_requests < 0:
        raise ValueError(f"n_requests must be >= 0, got {n_requests}")
    if n_keys <= 0:
        raise ValueError(f"n_keys must be > 0, got {n_keys}")
    if alpha <= 0:
        raise ValueError(f"alpha must be > 0, got {alpha}")

    rng     = np.random.default_rng(seed)
    weights = 1.0 / np.arange(1, n_keys + 1) ** alpha
    ranks   = rng.choice(n_keys, size=n_requests, p=weights / weights.sum())
    return pd.DataFrame({
        "key":   [f"k{r}" for r in ranks],
        "bytes": np.ones(n_requests, dtype=np.int64),
    })
