"""
Immutable attribute types held by the convention index.

``AttributeDefinition`` (see ``schema.py``) mirrors the YAML as written;
``Attribute`` is the normalised form the classifier and variant validator
work with.  The type is a closed sum: ``SimpleType`` or ``ComplexType``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from honeyhealth.conventions.schema import AttributeDefinition, ComplexTypeDefinition

TEMPLATE_MARKER = "template"


@dataclass(frozen=True)
class SimpleType:
    """A plain type tag such as ``string``, ``int`` or ``template[string]``."""

    tag: str


@dataclass(frozen=True)
class ComplexType:
    """An enumerated type."""

    members: tuple[Union[str, int], ...] = ()
    allow_custom_values: bool = False

    def member_strings(self) -> set[str]:
        """Members in the trimmed textual form used for comparison."""
        return {str(member).strip() for member in self.members}


AttributeType = Union[SimpleType, ComplexType]


@dataclass(frozen=True)
class Attribute:
    """One declared convention entry."""

    type: AttributeType
    deprecated: Optional[str] = None
    brief: Optional[str] = None

    @property
    def is_deprecated(self) -> bool:
        return self.deprecated is not None

    @property
    def is_complex(self) -> bool:
        return isinstance(self.type, ComplexType)

    @classmethod
    def from_definition(cls, definition: AttributeDefinition) -> "Attribute":
        """Normalise a parsed YAML declaration.

        A declaration without a type is treated as ``SimpleType("string")``,
        the default type of a convention attribute.
        """
        raw = definition.type
        attr_type: AttributeType
        if isinstance(raw, ComplexTypeDefinition):
            attr_type = ComplexType(
                members=tuple(m.value for m in raw.members),
                allow_custom_values=raw.allow_custom_values,
            )
        else:
            attr_type = SimpleType(raw if raw is not None else "string")
        brief = definition.brief.strip() if definition.brief else None
        return cls(type=attr_type, deprecated=definition.deprecated, brief=brief)


def is_template_tag(raw_type: Union[str, ComplexTypeDefinition, None]) -> bool:
    """True if a raw type tag marks the attribute as a template."""
    return isinstance(raw_type, str) and raw_type.startswith(TEMPLATE_MARKER)
