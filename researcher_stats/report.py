from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from pydantic_core import to_jsonable_python

from researcher_stats.engine import DEFAULT_ENGINE, StatisticsEngine
from researcher_stats.options import StatisticsOptions
from researcher_stats.records import ResearcherRecord
from researcher_stats.results import (
    CountryStats,
    DistributionBucket,
    PositionStats,
    ResearchAreaStats,
    SectorStats,
    SummaryStats,
    TopResearcher,
)
from researcher_stats.taxonomy import Taxonomy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatisticsReport:
    summary: SummaryStats
    countries: Tuple[CountryStats, ...]
    research_areas: Tuple[ResearchAreaStats, ...]
    hindex_distribution: Tuple[DistributionBucket, ...]
    citations_distribution: Tuple[DistributionBucket, ...]
    sectors: SectorStats
    positions: Tuple[PositionStats, ...]
    top_by_hindex: Tuple[TopResearcher, ...]
    top_by_citations: Tuple[TopResearcher, ...]


def build_report(
    records: Sequence[ResearcherRecord],
    taxonomy: Optional[Taxonomy] = None,
    options: Optional[StatisticsOptions] = None,
    *,
    engine: StatisticsEngine = DEFAULT_ENGINE,
) -> StatisticsReport:
    """Compute every statistics view over one snapshot of records."""
    options = options or StatisticsOptions()
    logger.debug("Building statistics report for %d records (top_n=%d)", len(records), options.top_n)
    return StatisticsReport(
        summary=engine.get_summary_stats(records),
        countries=engine.get_country_distribution(records),
        research_areas=engine.get_research_area_distribution(records, taxonomy),
        hindex_distribution=engine.get_hindex_distribution(records),
        citations_distribution=engine.get_citations_distribution(records),
        sectors=engine.get_sector_breakdown(records),
        positions=engine.get_position_distribution(records),
        top_by_hindex=engine.get_top_by_hindex(records, options.top_n),
        top_by_citations=engine.get_top_by_citations(records, options.top_n),
    )


def report_payload(report: StatisticsReport, options: Optional[StatisticsOptions] = None) -> Dict[str, Any]:
    """JSON-serializable form of ``report``; open bucket bounds become ``None``."""
    options = options or StatisticsOptions()
    payload = {"filters": asdict(options), **asdict(report)}
    return to_jsonable_python(payload, inf_nan_mode="null")
