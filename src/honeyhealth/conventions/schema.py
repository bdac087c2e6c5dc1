"""
Pydantic v2 models for the semantic convention document YAML format.

A document is a mapping with a ``groups`` list.  Each group optionally
carries a namespace ``prefix`` and a list of ``attributes``; an attribute
declares its ``id``, a simple type tag or an enumerated (complex) type, and
an optional deprecation note.

Convention documents carry many keys this tool does not use (``stability``,
``examples``, ``requirement_level``, ``note`` ...), so the models use
``extra="ignore"``.

Usage::

    from honeyhealth.conventions.schema import ConventionDocument
    import yaml

    with open("registry/http.yaml") as fh:
        raw = yaml.safe_load(fh)
    document = ConventionDocument.model_validate(raw)
"""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Attribute types
# ---------------------------------------------------------------------------


class MemberDefinition(BaseModel):
    """One enumerated value of a complex attribute type."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(None, description="Member identifier")
    value: Union[str, int] = Field(
        ..., description="Member value as recorded in telemetry"
    )
    brief: Optional[str] = Field(None, description="Short description")


class ComplexTypeDefinition(BaseModel):
    """An enumerated attribute type: a member list plus an escape hatch."""

    model_config = ConfigDict(extra="ignore")

    members: list[MemberDefinition] = Field(
        default_factory=list, description="Declared member values"
    )
    allow_custom_values: bool = Field(
        False, description="Whether values beyond the members are acceptable"
    )


# ---------------------------------------------------------------------------
# Attributes and groups
# ---------------------------------------------------------------------------


class AttributeDefinition(BaseModel):
    """A single attribute declaration inside a group."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(
        None, description="Attribute id, appended to the group prefix"
    )
    brief: Optional[str] = Field(None, description="Short description")
    type: Optional[Union[str, ComplexTypeDefinition]] = Field(
        None,
        description="Type tag (string, int, template[string] ...) or enum type",
    )
    deprecated: Optional[str] = Field(
        None, description="Deprecation reason; presence retires the attribute"
    )


class GroupDefinition(BaseModel):
    """A namespace group of attribute declarations."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = Field(None, description="Group identifier")
    prefix: Optional[str] = Field(
        None, description="Namespace prefix shared by the group's attributes"
    )
    attributes: Optional[list[AttributeDefinition]] = Field(
        None, description="Attribute declarations"
    )


# ---------------------------------------------------------------------------
# Top-level document
# ---------------------------------------------------------------------------


class ConventionDocument(BaseModel):
    """Root model for one semantic convention YAML file."""

    model_config = ConfigDict(extra="ignore")

    groups: list[GroupDefinition] = Field(
        ..., description="Namespace groups declared by this document"
    )
