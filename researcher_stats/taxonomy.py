"""Research-track taxonomy and the per-track researcher counter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Sequence, Set, Tuple

from pydantic import TypeAdapter, ValidationError

from researcher_stats.records import ResearcherRecord
from researcher_stats.results import ResearchAreaStats

logger = logging.getLogger(__name__)

MAIN_TRACKS: Tuple[str, ...] = (
    "Artificial Intelligence",
    "Natural Language Processing",
    "Computer Vision",
    "Multimodal AI",
    "Robotics & Autonomous Systems",
    "Data Science & Analytics",
    "Data Management",
    "Computer Systems & Architecture",
    "Computer Networks & Communications",
    "Software Engineering",
    "Programming Languages",
    "Theory of Computation",
    "Security & Cryptography",
    "Human-Computer Interaction",
    "Graphics & Visualization",
    "Applied Computing",
)

_LABELS = TypeAdapter(List[str])


@dataclass(frozen=True)
class Taxonomy:
    """Track names in display order and the interest labels counting toward each."""

    keywords: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    tracks: Tuple[str, ...] = MAIN_TRACKS

    def __post_init__(self) -> None:
        frozen = {track: frozenset(labels) for track, labels in self.keywords.items()}
        object.__setattr__(self, "keywords", MappingProxyType(frozen))
        object.__setattr__(self, "tracks", tuple(self.tracks))

    def labels_for(self, track: str) -> FrozenSet[str]:
        return self.keywords.get(track, frozenset())


def taxonomy_from_dict(raw: Any, *, tracks: Sequence[str] = MAIN_TRACKS) -> Taxonomy:
    """Build a taxonomy from a ``categories.json`` style mapping.

    Accepts ``{"categories": {track: [labels]}}`` or the bare inner mapping.
    Anything malformed is logged and dropped, leaving those tracks empty.
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning("Ignoring taxonomy of type %s", type(raw).__name__)
        return Taxonomy(tracks=tuple(tracks))

    categories = raw.get("categories", raw)
    if not isinstance(categories, Mapping):
        logger.warning("Ignoring taxonomy categories of type %s", type(categories).__name__)
        return Taxonomy(tracks=tuple(tracks))

    keywords: Dict[str, FrozenSet[str]] = {}
    for track, labels in categories.items():
        try:
            keywords[str(track)] = frozenset(_LABELS.validate_python(labels))
        except ValidationError:
            logger.warning("Ignoring malformed keyword list for track %r", track)
            continue
    return Taxonomy(keywords=keywords, tracks=tuple(tracks))


def count_research_areas(records: Iterable[ResearcherRecord], taxonomy: Taxonomy) -> Tuple[ResearchAreaStats, ...]:
    area_counts: Dict[str, int] = {track: 0 for track in taxonomy.tracks}
    track_labels = [(track, taxonomy.labels_for(track)) for track in taxonomy.tracks]

    for record in records:
        counted: Set[str] = set()
        for interest in record.standardized_interests:
            for track, labels in track_labels:
                if track not in counted and interest in labels:
                    area_counts[track] += 1
                    counted.add(track)

    # sorted() is stable, so ties keep the declared track order.
    ranked = sorted(
        (ResearchAreaStats(area=track, count=area_counts[track]) for track in taxonomy.tracks if area_counts[track] > 0),
        key=lambda s: s.count,
        reverse=True,
    )
    return tuple(ranked)
