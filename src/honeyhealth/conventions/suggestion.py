"""
Classification verdicts and diagnostic comments.

A ``Suggestion`` is the verdict for one observed name: ``Matching``,
``Missing`` (not a convention, but acceptable) or ``Bad``.  Non-matching
verdicts carry an ordered tuple of comments, in evaluation order
(case, namespace extension, no namespace, similarity), not in order of
significance.

Each comment renders as plain text for CSV/console output and as
Markdown-escaped text for Markdown reports.

Usage::

    from honeyhealth.conventions.suggestion import Suggestion, WrongCase

    s = Suggestion.bad([WrongCase()])
    s.name               # "Bad"
    s.comments_string()  # "WrongCase"
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

_MARKDOWN_SPECIAL = set("\\`*_{}[]<>()#+!|")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters with meaning in Markdown tables."""
    return "".join(f"\\{ch}" if ch in _MARKDOWN_SPECIAL else ch for ch in text)


def escape_table_cell(text: str) -> str:
    """Escape pipes, which split a Markdown table cell even inside a code span."""
    return text.replace("|", "\\|")


class Verdict(str, Enum):
    """Stable short names of the three verdicts."""

    MATCHING = "Matching"
    MISSING = "Missing"
    BAD = "Bad"


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class _Comment(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def render(self) -> str:
        raise NotImplementedError

    def render_markdown(self) -> str:
        return escape_markdown(self.render())

    def __str__(self) -> str:
        return self.render()


class WrongCase(_Comment):
    """The name contains uppercase characters."""

    kind: Literal["wrong_case"] = "wrong_case"

    def render(self) -> str:
        return "WrongCase"


class NoNamespace(_Comment):
    """The name is not dot-namespaced."""

    kind: Literal["no_namespace"] = "no_namespace"

    def render(self) -> str:
        return "NoNamespace"


class Extends(_Comment):
    """The name sits below an existing convention namespace."""

    kind: Literal["extends"] = "extends"
    namespace: str

    def render(self) -> str:
        return f"Extends {self.namespace}"


class Similar(_Comment):
    """The name closely resembles one or more convention names."""

    kind: Literal["similar"] = "similar"
    names: tuple[str, ...]

    def render(self) -> str:
        return f"Similar to {' '.join(self.names)}"

    def render_markdown(self) -> str:
        return "Similar to " + " ".join(
            f"`{escape_table_cell(name)}`" for name in self.names
        )


class Deprecated(_Comment):
    """The name is a retired convention."""

    kind: Literal["deprecated"] = "deprecated"
    reason: str

    def render(self) -> str:
        return f"Deprecated: {self.reason.strip()}"


SuggestionComment = Annotated[
    Union[WrongCase, NoNamespace, Extends, Similar, Deprecated],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Suggestion
# ---------------------------------------------------------------------------


class Suggestion(BaseModel):
    """Verdict plus ordered diagnostic comments for one observed name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    verdict: Verdict
    comments: tuple[SuggestionComment, ...] = ()

    @model_validator(mode="after")
    def _matching_has_no_comments(self) -> "Suggestion":
        if self.verdict is Verdict.MATCHING and self.comments:
            raise ValueError("a Matching suggestion carries no comments")
        return self

    @classmethod
    def matching(cls) -> "Suggestion":
        return cls(verdict=Verdict.MATCHING)

    @classmethod
    def missing(cls, comments: Iterable[SuggestionComment] = ()) -> "Suggestion":
        return cls(verdict=Verdict.MISSING, comments=tuple(comments))

    @classmethod
    def bad(cls, comments: Iterable[SuggestionComment] = ()) -> "Suggestion":
        return cls(verdict=Verdict.BAD, comments=tuple(comments))

    @property
    def name(self) -> str:
        """Stable short name: ``Matching``, ``Missing`` or ``Bad``."""
        return self.verdict.value

    @property
    def is_matching(self) -> bool:
        return self.verdict is Verdict.MATCHING

    @property
    def is_bad(self) -> bool:
        return self.verdict is Verdict.BAD

    def comments_string(self) -> str:
        return "; ".join(c.render() for c in self.comments)

    def comments_markdown(self) -> str:
        return "; ".join(c.render_markdown() for c in self.comments)

    def __str__(self) -> str:
        if self.is_matching:
            return self.name
        return f"{self.name:7}  {self.comments_string()}"
