"""Researcher statistics engine (UI-agnostic).

This package contains:
- record source adapters (raw profile dicts -> records -> pandas frame)
- keyword classifiers for sector and position
- fixed-bucket metric distributions and the research-track counter
- a stateless engine exposing one pure function per statistics view
- a report bundle with a JSON-serializable payload
"""

from researcher_stats.engine import (
    DEFAULT_ENGINE,
    StatisticsEngine,
    get_citations_distribution,
    get_country_distribution,
    get_hindex_distribution,
    get_position_distribution,
    get_research_area_distribution,
    get_sector_breakdown,
    get_summary_stats,
    get_top_by_citations,
    get_top_by_hindex,
)
from researcher_stats.options import StatisticsOptions, normalize_options
from researcher_stats.records import Location, ResearcherRecord, records_from_dicts
from researcher_stats.report import StatisticsReport, build_report, report_payload
from researcher_stats.taxonomy import MAIN_TRACKS, Taxonomy, taxonomy_from_dict

__all__ = [
    "DEFAULT_ENGINE",
    "MAIN_TRACKS",
    "Location",
    "ResearcherRecord",
    "StatisticsEngine",
    "StatisticsOptions",
    "StatisticsReport",
    "Taxonomy",
    "build_report",
    "get_citations_distribution",
    "get_country_distribution",
    "get_hindex_distribution",
    "get_position_distribution",
    "get_research_area_distribution",
    "get_sector_breakdown",
    "get_summary_stats",
    "get_top_by_citations",
    "get_top_by_hindex",
    "normalize_options",
    "records_from_dicts",
    "report_payload",
    "taxonomy_from_dict",
]
