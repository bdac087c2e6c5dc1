"""
CLI command for ``honeyhealth report``: dataset health report.

Classifies every column of every recently written dataset in a column
export.  With more than one dataset a CSV comparison report is written;
with exactly one, the non-matching columns are listed.

Usage::

    honeyhealth report -m model/ --export columns.json
    honeyhealth report -m model/ --export columns.yaml -d checkout --markdown report.md
"""

import click

from honeyhealth.cli.common import build_index, model_option
from honeyhealth.config import get_config
from honeyhealth.conventions.errors import ConventionConfigError
from honeyhealth.report.render import (
    print_dataset_report,
    print_health,
    write_csv,
    write_markdown,
)
from honeyhealth.report.source import ExportFileSource
from honeyhealth.report.usage import ColumnUsageMap


@click.command()
@model_option
@click.option(
    "--export",
    "export_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON or YAML export of datasets and their columns.",
)
@click.option(
    "--dataset",
    "-d",
    "datasets",
    multiple=True,
    help="Limit the report to these datasets (repeatable). Default: all.",
)
@click.option(
    "--output",
    "-o",
    default=None,
    help="CSV report path, used when more than one dataset is included.",
)
@click.option(
    "--last-written-days",
    "-l",
    type=click.IntRange(min=1),
    default=None,
    help="Skip datasets and columns not written within this many days.",
)
@click.option(
    "--markdown",
    "markdown_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a Markdown report to this path.",
)
def report(models, export_path, datasets, output, last_written_days, markdown_path):
    """Report how well dataset columns follow the semantic conventions."""
    config = get_config()
    index = build_index(models)

    try:
        source = ExportFileSource(export_path)
    except ConventionConfigError as exc:
        raise click.ClickException(str(exc))

    usage = ColumnUsageMap.build(
        index,
        source,
        include_datasets=datasets,
        max_last_written_days=last_written_days or config.last_written_days,
    )
    if not usage.datasets:
        click.echo("No datasets found")
        return

    if len(usage.datasets) > 1:
        path = write_csv(usage, output or config.report_output)
        click.echo(f"Wrote {path}")
    if markdown_path:
        path = write_markdown(usage, markdown_path)
        click.echo(f"Wrote {path}")

    print_health(usage)
    print_dataset_report(usage)
