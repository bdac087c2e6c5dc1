"""
Report rendering: CSV, Markdown and console output.

The renderers only format; all verdicts come from ``ColumnUsageMap``.
Console output is styled with ``click.style`` and written with
``click.echo``, which drops the colour codes when stdout is not a TTY.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Union

import click

from honeyhealth.conventions.suggestion import (
    Verdict,
    escape_markdown,
    escape_table_cell,
)
from honeyhealth.report.usage import ColumnUsageMap

_VERDICT_COLOURS = {
    Verdict.MATCHING: "green",
    Verdict.MISSING: "yellow",
    Verdict.BAD: "red",
}


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


def render_csv(usage: ColumnUsageMap) -> str:
    """Dataset comparison CSV: one row per distinct column name."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Name", "Type", "SemConv", "Hint", "Usage", *usage.datasets, ""])
    for c in usage.sorted_columns():
        writer.writerow(
            [
                c.column.key_name,
                c.column.type,
                c.suggestion.name,
                c.suggestion.comments_string(),
                c.usage_count,
                *("x" if used else "" for used in c.datasets),
                "",
            ]
        )
    return buffer.getvalue()


def write_csv(usage: ColumnUsageMap, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(render_csv(usage), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------


def render_markdown(usage: ColumnUsageMap) -> str:
    """Markdown report: dataset health, non-matching columns, variants."""
    lines = ["## Dataset health", ""]
    lines.append("| Dataset | Match | Miss | Bad | Score |")
    lines.append("| --- | ---: | ---: | ---: | ---: |")
    for h in usage.dataset_health:
        lines.append(
            f"| {escape_markdown(h.slug)} | {h.matching} | {h.missing} "
            f"| {h.bad} | {h.score:.1f}% |"
        )

    lines += ["", "## Columns", ""]
    lines.append("| Column | SemConv | Hint | Usage |")
    lines.append("| --- | --- | --- | ---: |")
    for c in usage.sorted_columns():
        if c.suggestion.is_matching:
            continue
        lines.append(
            f"| `{escape_table_cell(c.column.key_name)}` | {c.suggestion.name} "
            f"| {c.suggestion.comments_markdown()} | {c.usage_count} |"
        )

    findings = usage.variant_findings()
    if findings:
        lines += ["", "## Undefined variants", ""]
        lines.append("| Attribute | Severity | Undefined values |")
        lines.append("| --- | --- | --- |")
        for check in findings:
            values = ", ".join(f"`{escape_table_cell(v)}`" for v in check.undefined)
            name = escape_table_cell(check.name)
            lines.append(f"| `{name}` | {check.severity} | {values} |")

    return "\n".join(lines) + "\n"


def write_markdown(usage: ColumnUsageMap, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(render_markdown(usage), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


def print_health(usage: ColumnUsageMap) -> None:
    """Right-aligned per-dataset table of verdict counts and score."""
    width = max([len("Dataset"), *(len(s) for s in usage.datasets)])
    click.echo(
        f"{click.style('Dataset'.rjust(width), bold=True)} "
        f"{click.style('Match', bold=True, fg='green')} "
        f"{click.style('Miss', bold=True, fg='yellow')}  "
        f"{click.style('Bad', bold=True, fg='red')}  "
        f"{click.style('Score', bold=True, fg='blue')}"
    )
    for h in usage.dataset_health:
        click.echo(
            f"{h.slug:>{width}}  {h.matching:4} {h.missing:4} {h.bad:4} {h.score:>5.1f}%"
        )


def print_dataset_report(usage: ColumnUsageMap) -> None:
    """Non-matching columns of a single-dataset report, coloured by verdict."""
    if len(usage.datasets) != 1:
        return
    columns = usage.sorted_columns()
    width = max([len("Column"), *(len(c.column.key_name) for c in columns)])
    click.echo()
    click.echo(
        f"{click.style('Column'.rjust(width), bold=True)} "
        f"{click.style('Suggestion', bold=True)}"
    )
    for c in columns:
        if c.suggestion.is_matching:
            continue
        name = click.style(
            c.column.key_name.rjust(width), fg=_VERDICT_COLOURS[c.suggestion.verdict]
        )
        click.echo(f"{name} {c.suggestion}")

    findings = usage.variant_findings()
    if findings:
        click.echo()
        click.echo(click.style("Undefined variants", bold=True))
        for check in findings:
            colour = "yellow" if check.severity == "warning" else "red"
            label = click.style(check.severity.upper().ljust(7), fg=colour)
            click.echo(f"  {label} {check.name}: {', '.join(check.undefined)}")
