"""
CLI command for ``honeyhealth check``: classify individual field names.

Usage::

    honeyhealth check -m model/ http.method http.Method userId
    honeyhealth check -m model/ --format json --strict http.method
"""

import json as _json
import sys

import click

from honeyhealth.cli.common import build_index, model_option
from honeyhealth.conventions.classifier import SuggestionClassifier
from honeyhealth.conventions.otel import emit_suggestion
from honeyhealth.conventions.suggestion import Verdict

_COLOURS = {Verdict.MATCHING: "green", Verdict.MISSING: "yellow", Verdict.BAD: "red"}


@click.command()
@click.argument("names", nargs=-1, required=True)
@model_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format.",
)
@click.option("--strict", is_flag=True, help="Exit with code 1 if any name is Bad.")
def check(names, models, output_format, strict):
    """Classify field NAMES against the semantic conventions."""
    index = build_index(models)
    classifier = SuggestionClassifier(index)
    results = classifier.classify_many(names)
    for name, suggestion in results.items():
        emit_suggestion(name, suggestion)

    if output_format == "json":
        payload = [
            {"name": name, **suggestion.model_dump(mode="json")}
            for name, suggestion in results.items()
        ]
        click.echo(_json.dumps(payload, indent=2))
    else:
        width = max(len(name) for name in results)
        for name, suggestion in results.items():
            label = click.style(name.rjust(width), fg=_COLOURS[suggestion.verdict])
            click.echo(f"{label} {suggestion}")

    if strict and any(s.is_bad for s in results.values()):
        sys.exit(1)
