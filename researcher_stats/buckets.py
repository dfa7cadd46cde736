from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from researcher_stats.results import DistributionBucket


@dataclass(frozen=True)
class BucketSpec:
    label: str
    min: float
    max: float


HINDEX_BUCKETS: Tuple[BucketSpec, ...] = (
    BucketSpec("0-10", 0, 10),
    BucketSpec("11-20", 11, 20),
    BucketSpec("21-30", 21, 30),
    BucketSpec("31-40", 31, 40),
    BucketSpec("41-50", 41, 50),
    BucketSpec("51-60", 51, 60),
    BucketSpec("61-70", 61, 70),
    BucketSpec("71-80", 71, 80),
    BucketSpec("81-90", 81, 90),
    BucketSpec("91+", 91, math.inf),
)

CITATION_BUCKETS: Tuple[BucketSpec, ...] = (
    BucketSpec("0-1K", 0, 1000),
    BucketSpec("1K-5K", 1001, 5000),
    BucketSpec("5K-10K", 5001, 10000),
    BucketSpec("10K-20K", 10001, 20000),
    BucketSpec("20K-50K", 20001, 50000),
    BucketSpec("50K-100K", 50001, 100000),
    BucketSpec("100K+", 100001, math.inf),
)


def bucket_counts(values: Iterable[float], specs: Sequence[BucketSpec]) -> Tuple[DistributionBucket, ...]:
    """Histogram ``values`` over ordered, non-overlapping ``specs``.

    Each value lands in the last bucket whose lower bound it reaches, which for
    integer metrics is the single interval containing it. Negative values are
    clipped into the first bucket so every value is counted once.
    """
    mins = np.array([s.min for s in specs], dtype=float)
    arr = np.clip(np.asarray(list(values), dtype=float), 0, None)
    counts = np.zeros(len(specs), dtype=np.int64)
    if arr.size:
        idx = np.searchsorted(mins, arr, side="right") - 1
        counts = np.bincount(np.clip(idx, 0, None), minlength=len(specs))
    return tuple(
        DistributionBucket(label=s.label, count=int(n), min=s.min, max=s.max)
        for s, n in zip(specs, counts)
    )
