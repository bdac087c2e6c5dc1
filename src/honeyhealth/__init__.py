"""
honey-health - semantic convention health for telemetry field names.

Classifies observed attribute / column names against a catalog of
OpenTelemetry-style semantic convention documents as Matching, Missing or
Bad, with diagnostics, and checks enumerated attribute values.

Example:
    from pathlib import Path
    from honeyhealth import ConventionIndex, SuggestionClassifier

    index = ConventionIndex.build([Path("model")])
    print(SuggestionClassifier(index).classify("http.Method"))
"""

from honeyhealth.conventions import (
    ConfigParseError,
    ConventionIndex,
    Suggestion,
    SuggestionClassifier,
    Verdict,
    check_variants,
    undefined_variants,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigParseError",
    "ConventionIndex",
    "Suggestion",
    "SuggestionClassifier",
    "Verdict",
    "check_variants",
    "undefined_variants",
    "__version__",
]
