"""
Column usage across datasets.

Reads every recently written dataset from a ``ColumnSource``, classifies
each distinct column name once, records which datasets use it and counts
Matching / Missing / Bad columns per dataset.  Enumerated attributes whose
observed values were exported are variant-checked.

Usage::

    from honeyhealth.report.usage import ColumnUsageMap

    usage = ColumnUsageMap.build(index, ExportFileSource("export.json"))
    for health in usage.dataset_health:
        print(health.slug, health.score)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from honeyhealth.conventions.classifier import SuggestionClassifier
from honeyhealth.conventions.index import ConventionIndex
from honeyhealth.conventions.otel import emit_suggestion, emit_variant_check
from honeyhealth.conventions.variants import VariantCheck, check_variants
from honeyhealth.report.models import ColumnUsage, DatasetHealth
from honeyhealth.report.source import ColumnSource

logger = logging.getLogger(__name__)


def _age_days(now: datetime, when: Optional[datetime]) -> int:
    """Whole days between ``when`` and ``now``; unknown or naive-UTC safe."""
    if when is None:
        return 0
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return (now - when).days


class ColumnUsageMap:
    """Distinct column names, their verdicts and per-dataset health."""

    def __init__(
        self,
        datasets: list[str],
        columns: dict[str, ColumnUsage],
        dataset_health: list[DatasetHealth],
    ) -> None:
        self.datasets = datasets
        self.columns = columns
        self.dataset_health = dataset_health

    @classmethod
    def build(
        cls,
        index: ConventionIndex,
        source: ColumnSource,
        include_datasets: Optional[Iterable[str]] = None,
        max_last_written_days: int = 30,
        now: Optional[datetime] = None,
    ) -> "ColumnUsageMap":
        """Collect and classify the columns of every qualifying dataset.

        A dataset qualifies if it was written within ``max_last_written_days``
        and, when ``include_datasets`` is non-empty, is listed there.  Columns
        older than the same window are skipped.
        """
        now = now or datetime.now(timezone.utc)
        include = set(include_datasets or ())
        classifier = SuggestionClassifier(index)

        slugs = sorted(
            d.slug
            for d in source.list_datasets()
            if _age_days(now, d.last_written_at) < max_last_written_days
            and (not include or d.slug in include)
        )
        logger.info("Reading %d datasets", len(slugs))

        columns: dict[str, ColumnUsage] = {}
        observed: dict[str, list[Any]] = {}
        health: list[DatasetHealth] = []

        for dataset_num, slug in enumerate(slugs):
            dataset_health = DatasetHealth(slug=slug)
            for column in source.list_columns(slug):
                if _age_days(now, column.last_written) >= max_last_written_days:
                    continue

                usage = columns.get(column.key_name)
                if usage is None:
                    suggestion = classifier.classify(column.key_name)
                    emit_suggestion(column.key_name, suggestion)
                    usage = ColumnUsage(
                        column=column,
                        suggestion=suggestion,
                        datasets=[False] * len(slugs),
                    )
                    columns[column.key_name] = usage
                usage.datasets[dataset_num] = True

                if column.values is not None:
                    observed.setdefault(column.key_name, []).extend(column.values)

                dataset_health.record(usage.suggestion)
            logger.debug(
                "Dataset %s: matching=%d missing=%d bad=%d",
                slug,
                dataset_health.matching,
                dataset_health.missing,
                dataset_health.bad,
            )
            health.append(dataset_health)

        for name, values in observed.items():
            check = check_variants(index, name, values, classifier=classifier)
            if check is not None:
                emit_variant_check(check)
                columns[name].variants = check

        return cls(datasets=slugs, columns=columns, dataset_health=health)

    def sorted_columns(self) -> list[ColumnUsage]:
        return [self.columns[name] for name in sorted(self.columns)]

    def variant_findings(self) -> list[VariantCheck]:
        """Variant checks that found undefined values, sorted by name."""
        return [
            usage.variants
            for usage in self.sorted_columns()
            if usage.variants is not None and not usage.variants.passed
        ]
