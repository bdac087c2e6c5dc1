"""
Convention index: the queryable form of a convention model.

Aggregates the declarations of every convention document under one or
more model roots, plus the compiled-in builtins, into three lookups:

- ``attribute_map``: exact namespaced name -> attribute (``None`` for
  builtins, which carry no metadata)
- ``templates``: template prefix -> attribute, for attributes whose final
  name segment is caller-supplied (e.g. a dynamic header name)
- ``prefixes``: every namespace known to exist

The index is built once and is read-only afterwards: mappings are exposed
as ``MappingProxyType`` and prefixes as a ``frozenset``, so any number of
readers may classify against it concurrently.

Usage::

    from honeyhealth.conventions.index import ConventionIndex

    index = ConventionIndex.build([Path("model")])
    index.lookup("http.request.method")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Union

from honeyhealth.conventions.attributes import Attribute
from honeyhealth.conventions.builtins import BUILTIN_NAMES, BUILTIN_PREFIXES
from honeyhealth.conventions.errors import ModelPathError
from honeyhealth.conventions.loader import ConventionDocumentLoader, Declaration
from honeyhealth.conventions.schema import ConventionDocument

logger = logging.getLogger(__name__)


def namespace_prefixes(name: str) -> list[str]:
    """Break ``a.b.c`` into ``["a", "a.b", "a.b.c"]``.

    The full name is included so it can later be recognised as the
    namespace of a longer name (``a.b.c.d`` extends ``a.b.c``).
    """
    parts = name.split(".")
    return [".".join(parts[: i + 1]) for i in range(len(parts))]


@dataclass(frozen=True)
class DuplicateDeclaration:
    """A name declared more than once; the later declaration won."""

    name: str
    first_source: str
    second_source: str
    template: bool = False


class ConventionIndex:
    """Immutable lookup structures over a loaded convention model.

    Use ``build()`` or ``from_documents()`` rather than the constructor.
    """

    def __init__(
        self,
        attribute_map: Mapping[str, Optional[Attribute]],
        templates: Mapping[str, Optional[Attribute]],
        prefixes: Iterable[str],
        sources: Sequence[Path] = (),
        duplicates: Sequence[DuplicateDeclaration] = (),
    ) -> None:
        self._attribute_map = MappingProxyType(dict(attribute_map))
        self._templates = MappingProxyType(dict(templates))
        self._prefixes = frozenset(prefixes)
        self._sources = tuple(sources)
        self._duplicates = tuple(duplicates)

    # -- construction ------------------------------------------------------

    @classmethod
    def build(
        cls,
        root_dirs: Sequence[Union[str, Path]],
        loader: Optional[ConventionDocumentLoader] = None,
    ) -> "ConventionIndex":
        """Load every convention document under ``root_dirs``.

        Roots are processed in the order given; documents within a root in
        sorted path order.

        Raises:
            ModelPathError: If a root is not a directory.
            ConfigParseError: If any document is unreadable or malformed.
                No partial index is returned.
        """
        roots = [Path(r) for r in root_dirs]
        for root in roots:
            if not root.is_dir():
                raise ModelPathError(root)

        loader = loader or ConventionDocumentLoader()
        documents: list[tuple[Path, ConventionDocument]] = []
        for root in roots:
            paths = loader.discover(root)
            logger.debug("Discovered %d convention documents under %s", len(paths), root)
            for path in paths:
                documents.append((path, loader.load(path)))

        return cls.from_documents(documents)

    @classmethod
    def from_documents(
        cls, documents: Iterable[tuple[Union[str, Path], ConventionDocument]]
    ) -> "ConventionIndex":
        """Build an index from already-parsed ``(source, document)`` pairs."""
        builder = _IndexBuilder()
        for source, document in documents:
            builder.add_document(Path(source), document)
        index = builder.freeze()
        logger.info(
            "Built convention index: documents=%d attributes=%d templates=%d "
            "prefixes=%d duplicates=%d",
            len(index.sources),
            len(index.attribute_map),
            len(index.templates),
            len(index.prefixes),
            len(index.duplicates),
        )
        return index

    # -- read access -------------------------------------------------------

    @property
    def attribute_map(self) -> Mapping[str, Optional[Attribute]]:
        return self._attribute_map

    @property
    def templates(self) -> Mapping[str, Optional[Attribute]]:
        return self._templates

    @property
    def prefixes(self) -> frozenset[str]:
        return self._prefixes

    @property
    def sources(self) -> tuple[Path, ...]:
        return self._sources

    @property
    def duplicates(self) -> tuple[DuplicateDeclaration, ...]:
        return self._duplicates

    def template_key(self, name: str) -> Optional[str]:
        """The template registration key covering ``name``, if any."""
        head, sep, _ = name.rpartition(".")
        if sep and head in self._templates:
            return head
        return None

    def lookup(self, name: str) -> Optional[Attribute]:
        """Attribute metadata for ``name``: exact names first, then templates."""
        if name in self._attribute_map:
            return self._attribute_map[name]
        key = self.template_key(name)
        if key is not None:
            return self._templates[key]
        return None

    def is_deprecated(self, name: str) -> bool:
        attribute = self.lookup(name)
        return attribute is not None and attribute.is_deprecated

    def longest_existing_prefix(self, name: str) -> Optional[str]:
        """Longest strict ancestor namespace of ``name`` that exists.

        Strips trailing dot-segments one at a time from the right.
        """
        head = name
        while True:
            head, sep, _ = head.rpartition(".")
            if not sep:
                return None
            if head in self._prefixes:
                return head

    def candidate_names(self) -> list[str]:
        """Non-deprecated exact and template keys, for similarity search."""
        names: list[str] = []
        for table in (self._attribute_map, self._templates):
            for name, attribute in table.items():
                if attribute is None or not attribute.is_deprecated:
                    names.append(name)
        return names

    def __repr__(self) -> str:
        return (
            f"ConventionIndex(attributes={len(self._attribute_map)}, "
            f"templates={len(self._templates)}, prefixes={len(self._prefixes)})"
        )


class _IndexBuilder:
    """Mutable accumulator used only while an index is being built."""

    def __init__(self) -> None:
        self.attribute_map: dict[str, Optional[Attribute]] = {
            name: None for name in BUILTIN_NAMES
        }
        self.templates: dict[str, Optional[Attribute]] = {}
        self.prefixes: set[str] = set(BUILTIN_PREFIXES)
        self.sources: list[Path] = []
        self.duplicates: list[DuplicateDeclaration] = []
        # (is_template, name) -> declaring document
        self._declared_in: dict[tuple[bool, str], Path] = {}

    def add_document(self, source: Path, document: ConventionDocument) -> None:
        self.sources.append(source)
        count = 0
        for decl in ConventionDocumentLoader.iter_declarations(document):
            self.add(decl, source)
            count += 1
        logger.debug("Indexed %d declarations from %s", count, source)

    def add(self, decl: Declaration, source: Path) -> None:
        self.prefixes.update(namespace_prefixes(decl.name))
        table = self.templates if decl.is_template else self.attribute_map

        key = (decl.is_template, decl.name)
        previous = self._declared_in.get(key)
        if previous is not None:
            self.duplicates.append(
                DuplicateDeclaration(
                    name=decl.name,
                    first_source=str(previous),
                    second_source=str(source),
                    template=decl.is_template,
                )
            )
            logger.warning(
                "Convention '%s' declared in %s is redeclared in %s; "
                "the later declaration wins",
                decl.name,
                previous,
                source,
            )
        self._declared_in[key] = source
        table[decl.name] = decl.attribute

    def freeze(self) -> ConventionIndex:
        return ConventionIndex(
            attribute_map=self.attribute_map,
            templates=self.templates,
            prefixes=self.prefixes,
            sources=self.sources,
            duplicates=self.duplicates,
        )
