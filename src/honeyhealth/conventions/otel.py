"""
OTel span event emission helpers for convention checks.

Follows the ``add_span_event()`` pattern: every helper logs and then
records a flat span event on the current span, if one is recording.

Usage::

    from honeyhealth.conventions.otel import emit_index_built, emit_suggestion

    emit_index_built(index)
    emit_suggestion("http.Method", suggestion)
"""

from __future__ import annotations

import logging

from honeyhealth._otel_helpers import add_span_event
from honeyhealth.conventions.index import ConventionIndex
from honeyhealth.conventions.suggestion import Suggestion
from honeyhealth.conventions.variants import VariantCheck

logger = logging.getLogger(__name__)


def emit_index_built(index: ConventionIndex) -> None:
    """Emit a span event summarising a built index.

    Event name: ``convention.index.built``
    """
    attrs: dict[str, str | int | float | bool] = {
        "index.documents": len(index.sources),
        "index.attributes": len(index.attribute_map),
        "index.templates": len(index.templates),
        "index.prefixes": len(index.prefixes),
        "index.duplicates": len(index.duplicates),
    }
    logger.debug(
        "Convention index ready: documents=%d attributes=%d templates=%d",
        len(index.sources),
        len(index.attribute_map),
        len(index.templates),
    )
    add_span_event("convention.index.built", attrs)


def emit_suggestion(name: str, suggestion: Suggestion) -> None:
    """Emit a span event for one classified name.

    Event name: ``convention.suggestion``
    """
    attrs: dict[str, str | int | float | bool] = {
        "suggestion.name": name,
        "suggestion.verdict": suggestion.name,
        "suggestion.comments": suggestion.comments_string(),
    }
    add_span_event("convention.suggestion", attrs)


def emit_variant_check(check: VariantCheck) -> None:
    """Emit a span event for one enumerated attribute check.

    Event name: ``convention.variants.checked``
    """
    attrs: dict[str, str | int | float | bool] = {
        "variants.name": check.name,
        "variants.undefined": len(check.undefined),
        "variants.severity": check.severity,
        "variants.allow_custom_values": check.allow_custom_values,
    }
    if check.severity == "error":
        logger.warning(
            "Undefined variants for %s: %s", check.name, ", ".join(check.undefined)
        )
    add_span_event("convention.variants.checked", attrs)
