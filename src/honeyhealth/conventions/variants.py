"""
Variant validation for enumerated (complex) attributes.

``undefined_variants()`` computes which observed values are not declared
members of an attribute.  It only computes the set difference; the
``allow_custom_values`` escape hatch is a severity decision carried on
``VariantCheck`` for the reporting layer.

Severity behavior:
    - no undefined values              -> ``ok``
    - undefined, custom values allowed -> ``warning``
    - undefined, closed member set     -> ``error``

Usage::

    from honeyhealth.conventions.variants import check_variants

    check = check_variants(index, "http.request.method", {"GET", "PATCH"})
    if check is not None and not check.passed:
        print(check.severity, check.undefined)
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from honeyhealth.conventions.attributes import Attribute, ComplexType
from honeyhealth.conventions.classifier import SuggestionClassifier
from honeyhealth.conventions.index import ConventionIndex

logger = logging.getLogger(__name__)


def undefined_variants(attribute: Attribute, observed_values: Iterable[Any]) -> list[str]:
    """Observed values whose trimmed text is not a declared member.

    Values are returned as trimmed text, deduplicated, in first-seen order.
    Simple-typed attributes have no member set and yield ``[]``.
    """
    if not isinstance(attribute.type, ComplexType):
        return []

    defined = attribute.type.member_strings()
    undefined: list[str] = []
    seen: set[str] = set()
    for value in observed_values:
        text = str(value).strip()
        if text in defined or text in seen:
            continue
        seen.add(text)
        undefined.append(text)
    return undefined


class VariantCheck(BaseModel):
    """Result of checking one enumerated attribute's observed values."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Attribute name as observed")
    undefined: tuple[str, ...] = Field(
        (), description="Observed values that are not declared members"
    )
    allow_custom_values: bool = Field(
        False, description="Whether the attribute accepts undeclared values"
    )

    @property
    def passed(self) -> bool:
        return not self.undefined

    @property
    def severity(self) -> Literal["ok", "warning", "error"]:
        if not self.undefined:
            return "ok"
        return "warning" if self.allow_custom_values else "error"


def check_variants(
    index: ConventionIndex,
    name: str,
    observed_values: Iterable[Any],
    classifier: Optional[SuggestionClassifier] = None,
) -> Optional[VariantCheck]:
    """Variant-check ``name`` if it is a matching enumerated attribute.

    Returns ``None`` for names that do not classify as ``Matching`` and for
    attributes without a complex type (including builtins).
    """
    classifier = classifier or SuggestionClassifier(index)
    if not classifier.classify(name).is_matching:
        return None

    attribute = index.lookup(name)
    if attribute is None or not isinstance(attribute.type, ComplexType):
        return None

    check = VariantCheck(
        name=name,
        undefined=tuple(undefined_variants(attribute, observed_values)),
        allow_custom_values=attribute.type.allow_custom_values,
    )
    if not check.passed:
        logger.debug(
            "Attribute %s has %d undefined variant(s): %s",
            name,
            len(check.undefined),
            ", ".join(check.undefined),
        )
    return check
