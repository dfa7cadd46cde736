from __future__ import annotations

from collections import Counter
from typing import Sequence, Tuple

from researcher_stats.classifiers import (
    ACADEMIA,
    ACADEMIA_KEYWORDS,
    INDUSTRY,
    INDUSTRY_KEYWORDS,
    OTHER,
    POSITION_RULES,
    Rule,
    classify_sector,
    normalize_position,
    sector_rules,
)
from researcher_stats.metrics_overview import ranked_counts
from researcher_stats.records import ResearcherRecord, records_frame
from researcher_stats.results import PositionStats, SectorStats


def compute_sector_breakdown(
    records: Sequence[ResearcherRecord],
    *,
    academia_keywords: Sequence[str] = ACADEMIA_KEYWORDS,
    industry_keywords: Sequence[str] = INDUSTRY_KEYWORDS,
) -> SectorStats:
    rules = sector_rules(academia_keywords, industry_keywords)
    sectors = Counter(classify_sector(r.affiliation, r.position, rules) for r in records)
    return SectorStats(academia=sectors[ACADEMIA], industry=sectors[INDUSTRY], other=sectors[OTHER])


def compute_position_distribution(
    records: Sequence[ResearcherRecord],
    *,
    rules: Sequence[Rule] = POSITION_RULES,
) -> Tuple[PositionStats, ...]:
    positions = records_frame(records)["position"].dropna()
    normalized = positions.map(lambda p: normalize_position(str(p), rules))
    counts = ranked_counts(normalized)
    return tuple(PositionStats(position=str(label), count=int(n)) for label, n in counts.items())
