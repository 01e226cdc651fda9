# lru_poc/metrics.py
from .simulator import CacheSim, iter_requests

HIT_LAT_MS  = 5
MISS_LAT_MS = 40   # origin fetch


def replay_with_metrics(df, policy_ctor, capacity, key_func=None,
                        hit_lat_ms=HIT_LAT_MS, miss_lat_ms=MISS_LAT_MS,
                        progress=False):
    sim = CacheSim(capacity, policy_ctor)
    hits = reqs = 0
    lat_sum = 0.0

    for key, size in iter_requests(df, key_func, progress,
                                   desc=type(sim.policy).__name__):
        reqs += 1
        if sim.policy.request(key, size):
            hits += 1
            lat_sum += hit_lat_ms
        else:
            lat_sum += miss_lat_ms

    return {
        "requests": reqs,
        "hits": hits,
        "misses": reqs - hits,
        "evictions": sim.policy.stats.evictions,
        "hit_ratio": hits / reqs if reqs else 0.0,
        "avg_latency_ms": lat_sum / reqs if reqs else 0.0,
    }
