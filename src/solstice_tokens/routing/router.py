"""
Token router - selects the tokens each generator emits.

Routing is two pure passes composed and de-duplicated by name:
1. Explicit: glob patterns on token names plus declared collections
2. Fallback: tokens the first pass missed whose classified dimension
   matches the generator's dimension

Upstream naming conventions are inconsistent; the fallback pass
recovers tokens the patterns miss.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from functools import lru_cache

from solstice_tokens.errors import CollectionNotFoundError
from solstice_tokens.models.generator import CollectionRef, GeneratorSpec
from solstice_tokens.models.token import Token
from solstice_tokens.routing.classifier import ModeClassifier

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Compile a glob pattern anchored at both ends.

    '*' matches any sequence, '?' a single character; everything else
    is literal.
    """
    parts = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("^" + "".join(parts) + "$", re.DOTALL)


def matches_any(name: str, patterns: Iterable[str]) -> bool:
    """Whether a name matches any of the glob patterns."""
    return any(glob_to_regex(p).match(name) for p in patterns)


def filter_by_source(tokens: Iterable[Token], source: str | None) -> list[Token]:
    """Tokens from one source, or all tokens when source is None."""
    if source is None:
        return list(tokens)
    return [t for t in tokens if t.source == source]


def dedupe_by_name(tokens: Iterable[Token]) -> list[Token]:
    """Drop repeated names, keeping first occurrence order."""
    seen: set[str] = set()
    unique = []
    for token in tokens:
        if token.name not in seen:
            seen.add(token.name)
            unique.append(token)
    return unique


class TokenRouter:
    """Partitions tokens across generators."""

    def __init__(self, classifier: ModeClassifier | None = None):
        """
        Initialize the router.

        Args:
            classifier: Classifier for collection and fallback passes
        """
        self.classifier = classifier or ModeClassifier()

    def route(self, spec: GeneratorSpec, tokens: Iterable[Token]) -> list[Token]:
        """
        Select the tokens a generator emits.

        Args:
            spec: Generator routing configuration
            tokens: All loaded tokens

        Returns:
            Matched tokens, unique by name, in first-match order
        """
        candidates = filter_by_source(tokens, spec.source_filter)

        pattern_matched = self.match_patterns(spec, candidates)
        collection_matched = self.match_collections(spec, candidates)
        explicit = dedupe_by_name([*pattern_matched, *collection_matched])

        detected = self.detect_by_modes(spec, candidates, {t.name for t in explicit})

        if pattern_matched:
            logger.info(f"  {spec.id}: {len(pattern_matched)} tokens matched by patterns")
        if collection_matched:
            logger.info(f"  {spec.id}: {len(collection_matched)} tokens matched by collections")
        if detected:
            logger.info(f"  {spec.id}: {len(detected)} tokens detected by modes")
            for token in detected:
                logger.debug(f"    - {token.name}: collections={token.collection_ids()}")

        return dedupe_by_name([*explicit, *detected])

    def match_patterns(self, spec: GeneratorSpec, tokens: Sequence[Token]) -> list[Token]:
        """Tokens whose names match any of the generator's glob patterns."""
        if not spec.patterns:
            return []
        return [t for t in tokens if matches_any(t.name, spec.patterns)]

    def match_collections(self, spec: GeneratorSpec, tokens: Sequence[Token]) -> list[Token]:
        """
        Tokens carrying a mode from any declared collection.

        A declared collection that no token carries is logged and skipped.
        """
        matched: list[Token] = []
        for ref in spec.collections:
            try:
                matched.extend(self._collection_members(spec, ref, tokens))
            except CollectionNotFoundError as e:
                logger.warning(str(e))
        return matched

    def detect_by_modes(
        self,
        spec: GeneratorSpec,
        tokens: Sequence[Token],
        already_matched: set[str],
    ) -> list[Token]:
        """
        Classifier fallback for tokens the explicit pass missed.

        Args:
            spec: Generator routing configuration
            tokens: Candidate tokens
            already_matched: Names matched by the explicit pass

        Returns:
            Unmatched tokens whose dimension is the generator's dimension
        """
        dimension = spec.fallback_dimension
        if dimension is None:
            return []
        return [
            t
            for t in tokens
            if t.name not in already_matched and self.classifier.classify(t).matches(dimension)
        ]

    def _collection_members(
        self,
        spec: GeneratorSpec,
        ref: CollectionRef,
        tokens: Sequence[Token],
    ) -> list[Token]:
        members = [t for t in tokens if ref.id in t.collection_ids()]
        if not members:
            raise CollectionNotFoundError(ref.id, spec.id)
        return members
