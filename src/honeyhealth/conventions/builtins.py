"""
Reserved field names that are always compliant.

These are metadata fields the telemetry store adds to every event.  They
are not declared in any convention document and carry no attribute
metadata, so they are never deprecated and never variant-checked.
"""

BUILTIN_NAMES: tuple[str, ...] = (
    "duration_ms",
    "type",
    "meta.signal_type",
    "name",
    "span.kind",
    "span.num_events",
    "span.num_links",
    "trace.parent_id",
    "trace.span_id",
    "trace.trace_id",
    "meta.annotation_type",
    "parent_name",
    "status_code",
    "error",
)

BUILTIN_PREFIXES: tuple[str, ...] = ("meta", "span", "trace")
