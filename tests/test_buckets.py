import math

from researcher_stats.buckets import CITATION_BUCKETS, HINDEX_BUCKETS, BucketSpec, bucket_counts
from researcher_stats.engine import get_citations_distribution, get_hindex_distribution

from conftest import make_record


def _counts(buckets):
    return {b.label: b.count for b in buckets}


def test_hindex_boundaries():
    buckets = bucket_counts([0, 10, 11, 20, 21, 90, 91, 500], HINDEX_BUCKETS)
    counts = _counts(buckets)
    assert counts["0-10"] == 2
    assert counts["11-20"] == 2
    assert counts["21-30"] == 1
    assert counts["81-90"] == 1
    assert counts["91+"] == 2
    assert sum(counts.values()) == 8


def test_citation_boundaries():
    buckets = bucket_counts([1000, 1001, 5000, 100000, 100001, 2_000_000], CITATION_BUCKETS)
    counts = _counts(buckets)
    assert counts["0-1K"] == 1
    assert counts["1K-5K"] == 2
    assert counts["50K-100K"] == 1
    assert counts["100K+"] == 2


def test_empty_buckets_are_kept_in_declared_order():
    buckets = bucket_counts([], HINDEX_BUCKETS)
    assert [b.label for b in buckets] == [s.label for s in HINDEX_BUCKETS]
    assert all(b.count == 0 for b in buckets)
    assert buckets[-1].max == math.inf


def test_bucket_shape_passthrough():
    specs = (BucketSpec("low", 0, 4), BucketSpec("high", 5, math.inf))
    low, high = bucket_counts([1, 7, 9], specs)
    assert (low.label, low.count, low.min, low.max) == ("low", 1, 0, 4)
    assert (high.label, high.count, high.min) == ("high", 2, 5)


def test_missing_metric_falls_in_first_bucket():
    records = [make_record("a"), make_record("b", hindex=12, citedby=None)]
    hindex = get_hindex_distribution(records)
    citations = get_citations_distribution(records)
    assert hindex[0].count == 1
    assert hindex[1].count == 1
    assert citations[0].count == 2


def test_bucket_total_matches_record_count(records):
    assert sum(b.count for b in get_hindex_distribution(records)) == len(records)
    assert sum(b.count for b in get_citations_distribution(records)) == len(records)
    assert _counts(get_hindex_distribution(records)) == {
        "0-10": 2,
        "11-20": 1,
        "21-30": 0,
        "31-40": 0,
        "41-50": 1,
        "51-60": 0,
        "61-70": 0,
        "71-80": 0,
        "81-90": 0,
        "91+": 0,
    }
