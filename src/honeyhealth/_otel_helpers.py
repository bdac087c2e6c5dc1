"""
Shared OTel span event emission helper.

Provides ``add_span_event()``, the single implementation used by the
``otel.py`` modules so each one does not repeat the span recording check.

Usage::

    from honeyhealth._otel_helpers import add_span_event

    add_span_event("convention.index.built", {"index.attributes": 412})
"""

from __future__ import annotations

from opentelemetry import trace as otel_trace


def add_span_event(
    name: str, attributes: dict[str, str | int | float | bool]
) -> None:
    """Add an event to the current OTel span if it is recording.

    No-op when there is no active span or the span is not recording
    (the default when no SDK tracer provider is configured).

    Args:
        name: Event name (e.g. ``"convention.suggestion"``).
        attributes: Flat dict of span event attributes.
    """
    span = otel_trace.get_current_span()
    if span and span.is_recording():
        span.add_event(name=name, attributes=attributes)
