from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from researcher_stats.schemas import StatisticsOptionsModel

TOP_N_DEFAULT = 10
TOP_N_MAX = 200


@dataclass(frozen=True)
class StatisticsOptions:
    top_n: int = TOP_N_DEFAULT


def _as_int(value: object, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except Exception:
        return default


def normalize_options(raw: Optional[dict] = None) -> StatisticsOptions:
    raw = raw or {}
    top_n = _as_int(raw.get("top_n", TOP_N_DEFAULT), TOP_N_DEFAULT)
    top_n = max(0, min(TOP_N_MAX, top_n))
    return StatisticsOptions(top_n=top_n)


def options_from_model(model: StatisticsOptionsModel) -> StatisticsOptions:
    return normalize_options(model.model_dump())
