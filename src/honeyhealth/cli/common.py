"""Shared helpers for honey-health CLI commands."""

from __future__ import annotations

from typing import Sequence

import click

from honeyhealth.config import get_config
from honeyhealth.conventions.errors import ConventionConfigError
from honeyhealth.conventions.index import ConventionIndex
from honeyhealth.conventions.otel import emit_index_built


def model_option(func):
    """``-m/--model`` option, repeatable, falling back to configured paths."""
    return click.option(
        "--model",
        "-m",
        "models",
        multiple=True,
        type=click.Path(file_okay=False),
        help="Root of a semantic convention model directory (repeatable).",
    )(func)


def build_index(models: Sequence[str]) -> ConventionIndex:
    """Build the convention index, turning load failures into CLI errors."""
    roots = list(models) or get_config().model_paths
    if not roots:
        raise click.UsageError(
            "No convention model given; pass --model or set HONEYHEALTH_MODEL_PATHS."
        )
    try:
        index = ConventionIndex.build(roots)
    except ConventionConfigError as exc:
        raise click.ClickException(str(exc))
    emit_index_built(index)
    return index
