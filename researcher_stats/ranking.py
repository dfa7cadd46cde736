from __future__ import annotations

from typing import Literal, Sequence, Tuple

import pandas as pd

from researcher_stats.records import ResearcherRecord, metric_value, records_frame
from researcher_stats.results import TopResearcher

Metric = Literal["hindex", "citedby"]
METRICS: Tuple[str, ...] = ("hindex", "citedby")


def to_top_researcher(record: ResearcherRecord) -> TopResearcher:
    return TopResearcher(
        name=record.name,
        affiliation=record.affiliation,
        hindex=metric_value(record, "hindex"),
        citedby=metric_value(record, "citedby"),
        photo=record.photo,
    )


def top_researchers(records: Sequence[ResearcherRecord], metric: Metric, limit: int = 10) -> Tuple[TopResearcher, ...]:
    """Top ``limit`` records by ``metric``, highest first; ties keep input order."""
    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}; expected one of {METRICS}")
    if limit <= 0 or not records:
        return ()

    df: pd.DataFrame = records_frame(records)
    order = df.sort_values(metric, ascending=False, kind="stable").index[:limit]
    return tuple(to_top_researcher(records[int(i)]) for i in order)
