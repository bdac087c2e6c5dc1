"""
YAML loader for semantic convention documents.

Discovers convention documents under a model root, parses each into a
``ConventionDocument`` and yields the namespaced declarations the index is
built from.  Every failure (unreadable file, malformed YAML, schema
mismatch) surfaces as ``ConfigParseError`` carrying the source location.

Usage::

    from honeyhealth.conventions.loader import ConventionDocumentLoader

    loader = ConventionDocumentLoader()
    for path in loader.discover(Path("model")):
        document = loader.load(path)
        for decl in loader.iter_declarations(document):
            print(decl.name, decl.is_template)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import yaml
from pydantic import ValidationError

from honeyhealth.conventions.attributes import Attribute, is_template_tag
from honeyhealth.conventions.errors import ConfigParseError
from honeyhealth.conventions.schema import ConventionDocument

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".yml", ".yaml")


@dataclass(frozen=True)
class Declaration:
    """A namespaced attribute declaration yielded by one document.

    For a template, ``name`` is the registration key: the namespace under
    which the caller-supplied final segment lives.
    """

    name: str
    attribute: Attribute
    is_template: bool = False


class ConventionDocumentLoader:
    """Loads convention documents, caching parsed documents per path."""

    def __init__(self) -> None:
        self._cache: dict[str, ConventionDocument] = {}

    def clear_cache(self) -> None:
        """Drop all cached documents."""
        self._cache.clear()

    @staticmethod
    def discover(root: Path) -> list[Path]:
        """Return every convention document below ``root``, recursively.

        Sorted by POSIX path so that load order, and therefore which
        declaration wins on a duplicate name, is stable across platforms.
        """
        found = [
            p
            for p in root.rglob("*")
            if p.is_file() and p.suffix in DOCUMENT_SUFFIXES
        ]
        return sorted(found, key=lambda p: p.as_posix())

    def load(self, path: Path) -> ConventionDocument:
        """Load a convention document from a YAML file.

        Raises:
            ConfigParseError: If the file cannot be read, is not valid YAML,
                or does not match the document schema.
        """
        key = str(path.resolve())
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Convention document cache hit: %s", key)
            return cached

        try:
            with open(path, encoding="utf-8") as fh:
                text = fh.read()
        except OSError as exc:
            raise ConfigParseError(path, f"cannot read document: {exc}") from exc

        document = self.load_from_string(text, source=str(path))
        self._cache[key] = document
        logger.debug(
            "Loaded convention document %s: groups=%d", path, len(document.groups)
        )
        return document

    def load_from_string(
        self, yaml_str: str, source: str = "<string>"
    ) -> ConventionDocument:
        """Parse a convention document from a YAML string.

        Args:
            yaml_str: YAML content.
            source: Name used in error locations.

        Raises:
            ConfigParseError: On malformed YAML or a schema mismatch.
        """
        try:
            raw = yaml.safe_load(yaml_str)
        except yaml.MarkedYAMLError as exc:
            mark = exc.problem_mark
            raise ConfigParseError(
                source,
                str(exc.problem or exc),
                line=mark.line + 1 if mark is not None else None,
                column=mark.column + 1 if mark is not None else None,
            ) from exc
        except yaml.YAMLError as exc:
            raise ConfigParseError(source, str(exc)) from exc

        if not isinstance(raw, dict):
            raise ConfigParseError(
                source,
                f"expected YAML mapping at document root, got {type(raw).__name__}",
            )

        try:
            return ConventionDocument.model_validate(raw)
        except ValidationError as exc:
            raise ConfigParseError(source, _summarise_validation(exc)) from exc

    @staticmethod
    def iter_declarations(document: ConventionDocument) -> Iterator[Declaration]:
        """Yield ``(name, attribute)`` declarations for indexable attributes.

        An attribute is indexed only when it has an ``id``, its group has a
        ``prefix``, and it carries typing or brief metadata.  Anything else
        (``ref`` entries, prefix-less groups) is skipped without error.
        """
        for group in document.groups:
            if group.prefix is None or group.attributes is None:
                continue
            for definition in group.attributes:
                if definition.id is None:
                    continue
                if definition.type is None and definition.brief is None:
                    continue
                yield Declaration(
                    name=f"{group.prefix}.{definition.id}",
                    attribute=Attribute.from_definition(definition),
                    is_template=is_template_tag(definition.type),
                )


def _summarise_validation(exc: ValidationError) -> str:
    """Render pydantic errors as ``groups.0.attributes.2.type: message; ...``."""
    parts: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        msg = error.get("msg", "invalid")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or str(exc)
