"""
Evaluation settings.
CLI flags in lru_poc.evaluate override these defaults.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass
class EvalConfig:
    # capacities to sweep (entries)
    capacities: Tuple[int, ...] = (100, 500, 1000)

    # synthetic trace, used when trace_path is None
    trace_path: Optional[str] = None
    n_requests: int = 50_000
    n_keys: int = 5_000
    alpha: float = 1.1
    seed: int = 0

    # latency model
    hit_lat_ms: float = 5
    miss_lat_ms: float = 40

    out_path: str = "results.csv"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'trace': {
                'path': self.trace_path,
                'n_requests': self.n_requests,
                'n_keys': self.n_keys,
                'alpha': self.alpha,
                'seed': self.seed,
            },
            'latency': {
                'hit_ms': self.hit_lat_ms,
                'miss_ms': self.miss_lat_ms,
            },
            'capacities': list(self.capacities),
            'out_path': self.out_path,
        }
