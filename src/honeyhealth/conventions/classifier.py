"""
Suggestion classifier: verdicts for observed field names.

Decision order:

1. Exact convention name -> ``Matching``, or ``Bad([Deprecated])`` if
   the attribute is retired.
2. Name below a template prefix -> same rule, using the template.
3. Otherwise heuristics, all evaluated and accumulated in order:

   - uppercase characters      -> ``WrongCase``   (forces ``Bad``)
   - existing parent namespace -> ``Extends(ns)``
   - no dot at all             -> ``NoNamespace`` (forces ``Bad``)
   - Jaro similarity > 0.85    -> ``Similar(names)``

   The verdict is ``Bad`` if a forcing comment was raised, else ``Missing``.

Classification is a pure function of ``(name, index)`` and never raises.

Usage::

    from honeyhealth.conventions.classifier import SuggestionClassifier

    classifier = SuggestionClassifier(index)
    suggestion = classifier.classify("http.Method")
    print(suggestion)  # Bad      WrongCase; Extends http; Similar to http.method
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from honeyhealth.conventions.attributes import Attribute
from honeyhealth.conventions.index import ConventionIndex
from honeyhealth.conventions.similarity import jaro
from honeyhealth.conventions.suggestion import (
    Deprecated,
    Extends,
    NoNamespace,
    Similar,
    Suggestion,
    SuggestionComment,
    WrongCase,
)

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.85


def contains_uppercase(name: str) -> bool:
    return any(ch.isupper() for ch in name)


def has_namespace(name: str) -> bool:
    return "." in name


class SuggestionClassifier:
    """Classifies observed names against a ``ConventionIndex``.

    Holds no mutable state beyond the index reference, so one instance can
    be shared between threads.
    """

    def __init__(
        self,
        index: ConventionIndex,
        similarity_threshold: float = SIMILARITY_THRESHOLD,
    ) -> None:
        self._index = index
        self._threshold = similarity_threshold

    @property
    def index(self) -> ConventionIndex:
        return self._index

    def classify(self, name: str) -> Suggestion:
        """Return the verdict for one observed name."""
        index = self._index

        if name in index.attribute_map:
            return self._known(index.attribute_map[name])

        template_key = index.template_key(name)
        if template_key is not None:
            return self._known(index.templates[template_key])

        comments: list[SuggestionComment] = []
        bad = False

        if contains_uppercase(name):
            comments.append(WrongCase())
            bad = True

        namespace = index.longest_existing_prefix(name)
        if namespace is not None:
            comments.append(Extends(namespace=namespace))

        if not has_namespace(name):
            comments.append(NoNamespace())
            bad = True

        similar = self.similar(name)
        if similar:
            comments.append(Similar(names=tuple(similar)))

        suggestion = Suggestion.bad(comments) if bad else Suggestion.missing(comments)
        logger.debug("Classified %r as %s", name, suggestion)
        return suggestion

    def classify_many(self, names: Iterable[str]) -> dict[str, Suggestion]:
        """Classify each distinct name once, keeping first-seen order."""
        results: dict[str, Suggestion] = {}
        for name in names:
            if name not in results:
                results[name] = self.classify(name)
        return results

    def similar(self, name: str) -> list[str]:
        """Non-deprecated convention names scoring above the threshold.

        Ordered by descending score, ties by name.
        """
        scored = []
        for candidate in self._index.candidate_names():
            score = jaro(name, candidate)
            if score > self._threshold:
                scored.append((-score, candidate))
        return [candidate for _, candidate in sorted(scored)]

    @staticmethod
    def _known(attribute: Optional[Attribute]) -> Suggestion:
        if attribute is not None and attribute.deprecated is not None:
            return Suggestion.bad([Deprecated(reason=attribute.deprecated)])
        return Suggestion.matching()


def classify(index: ConventionIndex, name: str) -> Suggestion:
    """Convenience wrapper: ``SuggestionClassifier(index).classify(name)``."""
    return SuggestionClassifier(index).classify(name)
