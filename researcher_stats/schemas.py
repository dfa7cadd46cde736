from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    country: Optional[str] = None


class ResearcherModel(BaseModel):
    """One raw researcher profile as supplied by the record source."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    affiliation: Optional[str] = None
    position: Optional[str] = None
    hindex: Optional[int] = Field(default=None, ge=0)
    citedby: Optional[int] = Field(default=None, ge=0)
    photo: Optional[str] = None
    location: Optional[LocationModel] = None
    standardized_interests: List[str] = Field(default_factory=list)

    @field_validator("standardized_interests", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class StatisticsOptionsModel(BaseModel):
    top_n: int = 10
