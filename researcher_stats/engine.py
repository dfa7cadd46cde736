from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from researcher_stats.buckets import CITATION_BUCKETS, HINDEX_BUCKETS, BucketSpec, bucket_counts
from researcher_stats.classifiers import ACADEMIA_KEYWORDS, INDUSTRY_KEYWORDS, POSITION_RULES, Rule
from researcher_stats.metrics_overview import compute_country_distribution, compute_summary
from researcher_stats.metrics_profile import compute_position_distribution, compute_sector_breakdown
from researcher_stats.ranking import top_researchers
from researcher_stats.records import ResearcherRecord, metric_value
from researcher_stats.results import (
    CountryStats,
    DistributionBucket,
    PositionStats,
    ResearchAreaStats,
    SectorStats,
    SummaryStats,
    TopResearcher,
)
from researcher_stats.taxonomy import Taxonomy, count_research_areas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatisticsEngine:
    """Stateless facade over the aggregation views.

    The engine only holds the read-only lookup tables; every method is a pure
    function of its arguments.
    """

    academia_keywords: Tuple[str, ...] = ACADEMIA_KEYWORDS
    industry_keywords: Tuple[str, ...] = INDUSTRY_KEYWORDS
    position_rules: Tuple[Rule, ...] = POSITION_RULES
    hindex_buckets: Tuple[BucketSpec, ...] = HINDEX_BUCKETS
    citation_buckets: Tuple[BucketSpec, ...] = CITATION_BUCKETS
    taxonomy: Optional[Taxonomy] = None

    def get_summary_stats(self, records: Sequence[ResearcherRecord]) -> SummaryStats:
        return compute_summary(records)

    def get_country_distribution(self, records: Sequence[ResearcherRecord]) -> Tuple[CountryStats, ...]:
        return compute_country_distribution(records)

    def get_research_area_distribution(
        self,
        records: Sequence[ResearcherRecord],
        taxonomy: Optional[Taxonomy] = None,
    ) -> Tuple[ResearchAreaStats, ...]:
        if taxonomy is None:
            taxonomy = self.taxonomy
        if taxonomy is None:
            logger.debug("No taxonomy supplied; research areas are empty")
            taxonomy = Taxonomy()
        return count_research_areas(records, taxonomy)

    def get_hindex_distribution(self, records: Sequence[ResearcherRecord]) -> Tuple[DistributionBucket, ...]:
        return bucket_counts((metric_value(r, "hindex") for r in records), self.hindex_buckets)

    def get_citations_distribution(self, records: Sequence[ResearcherRecord]) -> Tuple[DistributionBucket, ...]:
        return bucket_counts((metric_value(r, "citedby") for r in records), self.citation_buckets)

    def get_sector_breakdown(self, records: Sequence[ResearcherRecord]) -> SectorStats:
        return compute_sector_breakdown(
            records,
            academia_keywords=self.academia_keywords,
            industry_keywords=self.industry_keywords,
        )

    def get_position_distribution(self, records: Sequence[ResearcherRecord]) -> Tuple[PositionStats, ...]:
        return compute_position_distribution(records, rules=self.position_rules)

    def get_top_by_hindex(self, records: Sequence[ResearcherRecord], limit: int = 10) -> Tuple[TopResearcher, ...]:
        return top_researchers(records, "hindex", limit)

    def get_top_by_citations(self, records: Sequence[ResearcherRecord], limit: int = 10) -> Tuple[TopResearcher, ...]:
        return top_researchers(records, "citedby", limit)


DEFAULT_ENGINE = StatisticsEngine()

get_summary_stats = DEFAULT_ENGINE.get_summary_stats
get_country_distribution = DEFAULT_ENGINE.get_country_distribution
get_research_area_distribution = DEFAULT_ENGINE.get_research_area_distribution
get_hindex_distribution = DEFAULT_ENGINE.get_hindex_distribution
get_citations_distribution = DEFAULT_ENGINE.get_citations_distribution
get_sector_breakdown = DEFAULT_ENGINE.get_sector_breakdown
get_position_distribution = DEFAULT_ENGINE.get_position_distribution
get_top_by_hindex = DEFAULT_ENGINE.get_top_by_hindex
get_top_by_citations = DEFAULT_ENGINE.get_top_by_citations
