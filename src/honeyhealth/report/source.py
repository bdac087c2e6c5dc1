"""
Column sources: where observed dataset and column names come from.

``ColumnSource`` is the boundary the report is built against.  The
bundled ``ExportFileSource`` reads a JSON or YAML export shaped like the
telemetry store's listings::

    datasets:
      - slug: checkout
        last_written_at: 2024-05-01T12:00:00Z
        columns:
          - key_name: http.request.method
            type: string
            last_written: 2024-05-01T12:00:00Z
            values: [GET, POST]

Clients for a live store implement the same two methods.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from honeyhealth.conventions.errors import ConventionConfigError
from honeyhealth.report.models import Column, Dataset

logger = logging.getLogger(__name__)


class ExportFormatError(ConventionConfigError):
    """Raised when a column export file is unreadable or malformed."""

    def __init__(self, path: Union[str, Path], message: str) -> None:
        self.path = str(path)
        super().__init__(f"{self.path}: {message}")


class ColumnSource(Protocol):
    """Anything that can list datasets and their columns."""

    def list_datasets(self) -> list[Dataset]: ...

    def list_columns(self, dataset_slug: str) -> list[Column]: ...


class _ExportedDataset(Dataset):
    columns: list[Column] = Field(default_factory=list)


class _ExportFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    datasets: list[_ExportedDataset] = Field(default_factory=list)


class ExportFileSource:
    """Column source backed by a local JSON or YAML export file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._export = self._read()

    def _read(self) -> _ExportFile:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ExportFormatError(self.path, f"cannot read export: {exc}") from exc

        try:
            if self.path.suffix == ".json":
                raw = json.loads(text)
            else:
                raw = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ExportFormatError(self.path, f"invalid export: {exc}") from exc

        if not isinstance(raw, dict):
            raise ExportFormatError(
                self.path, f"expected a mapping at root, got {type(raw).__name__}"
            )

        try:
            export = _ExportFile.model_validate(raw)
        except ValidationError as exc:
            raise ExportFormatError(self.path, str(exc)) from exc

        logger.debug(
            "Loaded column export %s: datasets=%d", self.path, len(export.datasets)
        )
        return export

    def list_datasets(self) -> list[Dataset]:
        return [
            Dataset(slug=d.slug, last_written_at=d.last_written_at)
            for d in self._export.datasets
        ]

    def list_columns(self, dataset_slug: str) -> list[Column]:
        for dataset in self._export.datasets:
            if dataset.slug == dataset_slug:
                return list(dataset.columns)
        return []
