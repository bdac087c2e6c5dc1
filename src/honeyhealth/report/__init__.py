"""
Dataset health report built on the convention suggestion engine.

Public API::

    from honeyhealth.report import (
        ColumnSource,
        ExportFileSource,
        ColumnUsageMap,
        render_csv,
        render_markdown,
    )
"""

from honeyhealth.report.models import Column, ColumnUsage, Dataset, DatasetHealth
from honeyhealth.report.render import (
    print_dataset_report,
    print_health,
    render_csv,
    render_markdown,
    write_csv,
    write_markdown,
)
from honeyhealth.report.source import ColumnSource, ExportFileSource, ExportFormatError
from honeyhealth.report.usage import ColumnUsageMap

__all__ = [
    # Models
    "Column",
    "ColumnUsage",
    "Dataset",
    "DatasetHealth",
    # Sources
    "ColumnSource",
    "ExportFileSource",
    "ExportFormatError",
    # Aggregation
    "ColumnUsageMap",
    # Rendering
    "render_csv",
    "render_markdown",
    "write_csv",
    "write_markdown",
    "print_health",
    "print_dataset_report",
]
