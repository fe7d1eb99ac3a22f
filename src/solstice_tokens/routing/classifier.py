"""
Mode classifier - which variation dimension(s) a token belongs to.

The collection id prefix of each mode key is the only signal. A token
with no mode keys, or none from a recognized collection, is static.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from solstice_tokens.constants import DEFAULT_COLLECTIONS, Dimension
from solstice_tokens.models.token import Token


@dataclass(frozen=True)
class ModeClassification:
    """Dimension flags for a token."""

    is_static: bool
    is_responsive: bool
    is_density: bool
    is_theme: bool

    @property
    def dimensions(self) -> list[Dimension]:
        """Flagged dimensions, static last."""
        flags = [
            (Dimension.RESPONSIVE, self.is_responsive),
            (Dimension.DENSITY, self.is_density),
            (Dimension.THEME, self.is_theme),
            (Dimension.STATIC, self.is_static),
        ]
        return [dimension for dimension, flag in flags if flag]

    def matches(self, dimension: Dimension) -> bool:
        """Whether the token participates in a dimension."""
        return {
            Dimension.STATIC: self.is_static,
            Dimension.RESPONSIVE: self.is_responsive,
            Dimension.DENSITY: self.is_density,
            Dimension.THEME: self.is_theme,
        }[dimension]


class ModeClassifier:
    """Classifies tokens by the collections their mode keys come from."""

    def __init__(self, collections: Mapping[str, Dimension] | None = None):
        """
        Initialize the classifier.

        Args:
            collections: Collection id -> dimension (default DEFAULT_COLLECTIONS)
        """
        self.collections = dict(collections if collections is not None else DEFAULT_COLLECTIONS)

    def dimension_of(self, collection_id: str) -> Dimension | None:
        """Dimension of a collection id, or None if unrecognized."""
        return self.collections.get(collection_id)

    def classify(self, token: Token) -> ModeClassification:
        """
        Classify a token.

        Args:
            token: Token to inspect

        Returns:
            Dimension flags
        """
        found = {
            dimension
            for dimension in map(self.dimension_of, token.collection_ids())
            if dimension is not None
        }
        return ModeClassification(
            is_static=not found,
            is_responsive=Dimension.RESPONSIVE in found,
            is_density=Dimension.DENSITY in found,
            is_theme=Dimension.THEME in found,
        )
