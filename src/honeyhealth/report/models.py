"""
Pydantic models for observed datasets, columns and their usage.

``Dataset`` and ``Column`` mirror the telemetry store's dataset and column
listings; ``ColumnUsage`` and ``DatasetHealth`` are the report aggregates.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from honeyhealth.conventions.suggestion import Suggestion, Verdict
from honeyhealth.conventions.variants import VariantCheck


class Column(BaseModel):
    """One observed column (attribute name) of a dataset."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    key_name: str = Field(..., min_length=1, description="Observed field name")
    type: str = Field("string", description="Store-side column type")
    description: str = ""
    hidden: bool = False
    last_written: Optional[datetime] = Field(
        None, description="When the column last received data"
    )
    values: Optional[list[Union[str, int, float, bool]]] = Field(
        None, description="Distinct observed values, when exported"
    )


class Dataset(BaseModel):
    """One dataset of the telemetry store."""

    model_config = ConfigDict(extra="ignore")

    slug: str = Field(..., min_length=1)
    last_written_at: Optional[datetime] = None


class ColumnUsage(BaseModel):
    """A distinct column name and the datasets it appears in."""

    model_config = ConfigDict(extra="forbid")

    column: Column
    suggestion: Suggestion
    datasets: list[bool] = Field(
        default_factory=list,
        description="One flag per report dataset, True where the column is used",
    )
    variants: Optional[VariantCheck] = None

    @property
    def usage_count(self) -> int:
        return sum(1 for used in self.datasets if used)


class DatasetHealth(BaseModel):
    """Verdict counts for one dataset."""

    model_config = ConfigDict(extra="forbid")

    slug: str
    matching: int = 0
    missing: int = 0
    bad: int = 0

    def record(self, suggestion: Suggestion) -> None:
        if suggestion.verdict is Verdict.MATCHING:
            self.matching += 1
        elif suggestion.verdict is Verdict.MISSING:
            self.missing += 1
        else:
            self.bad += 1

    @property
    def total(self) -> int:
        return self.matching + self.missing + self.bad

    @property
    def score(self) -> float:
        """Percentage of matching columns; 0.0 for an empty dataset."""
        if self.total == 0:
            return 0.0
        return self.matching / self.total * 100.0
