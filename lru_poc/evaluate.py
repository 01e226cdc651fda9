"""
Capacity x policy sweep over one trace.

    python -m lru_poc.evaluate --capacity 100 500 1000 --out results.csv
"""
import argparse
import logging
import sys

import pandas as pd

from .config import EvalConfig
from .errors import LRUPocError
from .metrics import replay_with_metrics
from .policies import LRUCache, OrderedLRU
from .trace import load_trace, zipf_trace

logger = logging.getLogger(__name__)

POLICIES = [("LRU", LRUCache), ("OrderedLRU", OrderedLRU)]


def build_parser() -> argparse.ArgumentParser:
    d = EvalConfig()
    p = argparse.ArgumentParser(prog="lru-poc-eval", description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("--trace", dest="trace_path", default=d.trace_path,
                   help="CSV/parquet trace with a 'key' column (default: synthetic Zipf)")
    p.add_argument("--capacity", dest="capacities", type=int, nargs="+",
                   default=list(d.capacities))
    p.add_argument("--requests", dest="n_requests", type=int, default=d.n_requests)
    p.add_argument("--keys", dest="n_keys", type=int, default=d.n_keys)
    p.add_argument("--alpha", type=float, default=d.alpha)
    p.add_argument("--seed", type=int, default=d.seed)
    p.add_argument("--hit-ms", dest="hit_lat_ms", type=float, default=d.hit_lat_ms)
    p.add_argument("--miss-ms", dest="miss_lat_ms", type=float, default=d.miss_lat_ms)
    p.add_argument("--out", dest="out_path", default=d.out_path)
    p.add_argument("--progress", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def config_from_args(args) -> EvalConfig:
    return EvalConfig(
        capacities=tuple(args.capacities),
        trace_path=args.trace_path,
        n_requests=args.n_requests,
        n_keys=args.n_keys,
        alpha=args.alpha,
        seed=args.seed,
        hit_lat_ms=args.hit_lat_ms,
        miss_lat_ms=args.miss_lat_ms,
        out_path=args.out_path,
    )


def get_trace(cfg: EvalConfig) -> pd.DataFrame:
    if cfg.trace_path:
        return load_trace(cfg.trace_path)
    return zipf_trace(cfg.n_requests, cfg.n_keys, cfg.alpha, cfg.seed)


def run(cfg: EvalConfig, df: pd.DataFrame, progress: bool = False) -> pd.DataFrame:
    rows = []
    for cap in cfg.capacities:
        for name, ctor in POLICIES:
            m = replay_with_metrics(df, ctor, cap,
                                    hit_lat_ms=cfg.hit_lat_ms,
                                    miss_lat_ms=cfg.miss_lat_ms,
                                    progress=progress)
            rows.append((name, cap, m["hit_ratio"], m["evictions"],
                         m["avg_latency_ms"]))
    return pd.DataFrame(rows, columns=["policy", "capacity", "hit_ratio",
                                       "evictions", "avg_latency_ms"])


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    cfg = config_from_args(args)
    logger.debug("config: %s", cfg.to_dict())

    try:
        df  = get_trace(cfg)
        res = run(cfg, df, progress=args.progress)
    # ValueError also covers bad zipf arguments and pandas parse errors
    except (LRUPocError, FileNotFoundError, ValueError) as e:
        logger.error("evaluation failed: %s", e)
        return 2

    logger.info("replayed %d requests", len(df))
    print(res)
    res.to_csv(cfg.out_path, index=False)
    logger.info("wrote %s", cfg.out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
