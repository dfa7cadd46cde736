from __future__ import annotations

from typing import Sequence, Tuple

import pandas as pd

from researcher_stats.records import ResearcherRecord, records_frame, round_half_up
from researcher_stats.results import CountryStats, SummaryStats


def compute_summary(records: Sequence[ResearcherRecord]) -> SummaryStats:
    df: pd.DataFrame = records_frame(records)
    total = int(len(df))
    if total == 0:
        return SummaryStats()

    avg_hindex = round_half_up(float(df["hindex"].mean()), 1) or 0.0
    return SummaryStats(
        total_researchers=total,
        avg_hindex=avg_hindex,
        total_citations=int(df["citedby"].sum()),
        highest_hindex=int(df["hindex"].max()),
    )


def ranked_counts(values: pd.Series) -> pd.Series:
    """Occurrences per distinct value, most frequent first, ties in first-seen order."""
    values = values.dropna()
    if values.empty:
        return pd.Series(dtype="int64")
    counts = values.groupby(values, sort=False).size()
    return counts.sort_values(ascending=False, kind="stable")


def compute_country_distribution(records: Sequence[ResearcherRecord]) -> Tuple[CountryStats, ...]:
    df = records_frame(records)
    counts = ranked_counts(df["country"])
    return tuple(CountryStats(country=str(country), count=int(n)) for country, n in counts.items())
