"""
Semantic convention index and suggestion engine.

Loads semantic convention documents into a ``ConventionIndex`` and
classifies observed field names against it.

Public API::

    from honeyhealth.conventions import (
        # Loading
        ConventionDocumentLoader,
        ConventionIndex,
        ConfigParseError,
        # Classification
        SuggestionClassifier,
        Suggestion,
        Verdict,
        # Variants
        undefined_variants,
        check_variants,
    )
"""

from honeyhealth.conventions.attributes import Attribute, ComplexType, SimpleType
from honeyhealth.conventions.classifier import (
    SIMILARITY_THRESHOLD,
    SuggestionClassifier,
    classify,
)
from honeyhealth.conventions.errors import (
    ConfigParseError,
    ConventionConfigError,
    ModelPathError,
)
from honeyhealth.conventions.index import (
    ConventionIndex,
    DuplicateDeclaration,
    namespace_prefixes,
)
from honeyhealth.conventions.loader import ConventionDocumentLoader, Declaration
from honeyhealth.conventions.otel import (
    emit_index_built,
    emit_suggestion,
    emit_variant_check,
)
from honeyhealth.conventions.schema import ConventionDocument
from honeyhealth.conventions.similarity import jaro
from honeyhealth.conventions.suggestion import (
    Deprecated,
    Extends,
    NoNamespace,
    Similar,
    Suggestion,
    SuggestionComment,
    Verdict,
    WrongCase,
)
from honeyhealth.conventions.variants import (
    VariantCheck,
    check_variants,
    undefined_variants,
)

__all__ = [
    # Types
    "Attribute",
    "SimpleType",
    "ComplexType",
    "ConventionDocument",
    # Loading
    "ConventionDocumentLoader",
    "Declaration",
    "ConventionIndex",
    "DuplicateDeclaration",
    "namespace_prefixes",
    # Errors
    "ConventionConfigError",
    "ConfigParseError",
    "ModelPathError",
    # Classification
    "SIMILARITY_THRESHOLD",
    "SuggestionClassifier",
    "classify",
    "jaro",
    "Suggestion",
    "SuggestionComment",
    "Verdict",
    "WrongCase",
    "NoNamespace",
    "Extends",
    "Similar",
    "Deprecated",
    # Variants
    "VariantCheck",
    "check_variants",
    "undefined_variants",
    # OTel
    "emit_index_built",
    "emit_suggestion",
    "emit_variant_check",
]
