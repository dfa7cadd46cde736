"""Value objects returned by the aggregation views."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryStats:
    total_researchers: int = 0
    avg_hindex: float = 0.0
    total_citations: int = 0
    highest_hindex: int = 0


@dataclass(frozen=True)
class CountryStats:
    country: str
    count: int


@dataclass(frozen=True)
class ResearchAreaStats:
    area: str
    count: int


@dataclass(frozen=True)
class DistributionBucket:
    label: str
    count: int
    min: float
    max: float


@dataclass(frozen=True)
class SectorStats:
    academia: int = 0
    industry: int = 0
    other: int = 0

    @property
    def total(self) -> int:
        return self.academia + self.industry + self.other


@dataclass(frozen=True)
class PositionStats:
    position: str
    count: int


@dataclass(frozen=True)
class TopResearcher:
    name: str
    affiliation: str
    hindex: int
    citedby: int
    photo: str
