from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd
from pydantic import ValidationError

from researcher_stats.schemas import ResearcherModel

logger = logging.getLogger(__name__)

METRIC_COLUMNS = ["hindex", "citedby"]
RECORD_COLUMNS = ["name", "affiliation", "position", "hindex", "citedby", "photo", "country"]


@dataclass(frozen=True)
class Location:
    country: Optional[str] = None


@dataclass(frozen=True)
class ResearcherRecord:
    name: str
    affiliation: str = ""
    position: str = ""
    hindex: Optional[int] = None
    citedby: Optional[int] = None
    photo: str = ""
    location: Optional[Location] = None
    standardized_interests: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def country(self) -> Optional[str]:
        if self.location is None:
            return None
        return normalize_text(self.location.country)


def normalize_text(value: object) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def metric_value(record: ResearcherRecord, metric: str) -> int:
    return getattr(record, metric) or 0


def round_half_up(value: object, ndigits: int = 0) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    q = Decimal(10) ** -ndigits
    return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP))


# ---------------- Record source ----------------
def record_from_model(model: ResearcherModel) -> ResearcherRecord:
    location = None
    if model.location is not None:
        location = Location(country=model.location.country)
    return ResearcherRecord(
        name=model.name,
        affiliation=model.affiliation or "",
        position=model.position or "",
        hindex=model.hindex,
        citedby=model.citedby,
        photo=model.photo or "",
        location=location,
        standardized_interests=tuple(model.standardized_interests),
    )


def records_from_dicts(rows: Iterable[Mapping[str, Any]]) -> List[ResearcherRecord]:
    """Validate raw profile mappings into records, skipping rows that fail validation."""
    records: List[ResearcherRecord] = []
    for idx, row in enumerate(rows):
        try:
            model = ResearcherModel.model_validate(row)
        except ValidationError as exc:
            logger.warning("Skipping researcher row %d: %s", idx, exc.errors(include_url=False))
            continue
        records.append(record_from_model(model))
    return records


# ---------------- Frame helpers ----------------
def numericize(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    for col in cols:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def coerce_str_safe(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    for col in cols:
        if col in df.columns:
            series = df[col].astype("string")
            series = series.replace({"": pd.NA})
            df[col] = series
    return df


def records_frame(records: Sequence[ResearcherRecord]) -> pd.DataFrame:
    """One row per record, in input order.

    Metrics are integers with missing values as 0. ``position`` and ``country``
    are nullable strings where empty means missing; other text columns are
    never null.
    """
    rows = [
        {
            "name": r.name,
            "affiliation": r.affiliation,
            "position": r.position,
            "hindex": r.hindex,
            "citedby": r.citedby,
            "photo": r.photo,
            "country": r.country,
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    df = numericize(df, METRIC_COLUMNS)
    for col in METRIC_COLUMNS:
        df[col] = df[col].fillna(0).astype("int64")
    df = coerce_str_safe(df, ["position", "country"])
    for col in ["name", "affiliation", "photo"]:
        df[col] = df[col].fillna("").astype(str)
    return df
