"""
Generator models - routing configuration for one output stylesheet.

A generator declares which tokens it wants (glob patterns, an optional
source filter, explicit collections) and how to emit them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from solstice_tokens.constants import (
    BREAKPOINTS,
    DENSITY_LEVELS,
    STATIC_ROOT,
    STRATEGY_DIMENSIONS,
    THEMES,
    Dimension,
    EmissionStrategy,
)


class ModeEntry(BaseModel):
    """One row of a mode table: which mode id goes in which block."""

    name: str = Field(..., description="Dimension value, e.g. 'tablet-Large' or 'dark'")
    mode_id: str | None = Field(None, alias="modeId", description="Mode id, None for static")
    selector: str = Field(..., description="Selector or media query of the block")

    model_config = {"frozen": True, "populate_by_name": True}


class CollectionRef(BaseModel):
    """An explicit upstream collection and the dimension it represents."""

    id: str
    dimension: Dimension

    model_config = {"frozen": True, "coerce_numbers_to_str": True}


def _table(rows: list[tuple[str, str | None, str]]) -> list[ModeEntry]:
    return [ModeEntry(name=name, mode_id=mode_id, selector=selector) for name, mode_id, selector in rows]


DEFAULT_MODE_TABLES: dict[EmissionStrategy, list[ModeEntry]] = {
    EmissionStrategy.STATIC_ONCE: _table(STATIC_ROOT),
    EmissionStrategy.RESPONSIVE: _table(BREAKPOINTS),
    EmissionStrategy.DENSITY: _table(DENSITY_LEVELS),
    EmissionStrategy.THEME: _table(THEMES),
}


class GeneratorSpec(BaseModel):
    """
    Routing and emission configuration for one generator.

    The emission strategy is kept as a plain string so that an unknown
    strategy is reported when that generator runs, without rejecting
    the whole routing document.
    """

    id: str
    name: str = ""
    target_file: str = Field(..., alias="targetFile")
    emission_strategy: str = Field(..., alias="emissionStrategy")
    patterns: list[str] = Field(default_factory=list)
    source_filter: str | None = Field(None, alias="sourceFilter")
    collections: list[CollectionRef] = Field(default_factory=list)
    dimension: Dimension | None = None
    modes: list[ModeEntry] | None = None
    description: str = ""

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @property
    def strategy(self) -> EmissionStrategy | None:
        """The emission strategy, or None if the name is unknown."""
        try:
            return EmissionStrategy(self.emission_strategy)
        except ValueError:
            return None

    @property
    def fallback_dimension(self) -> Dimension | None:
        """Dimension accepted by classifier fallback routing."""
        if self.dimension is not None:
            return self.dimension
        strategy = self.strategy
        return STRATEGY_DIMENSIONS[strategy] if strategy else None

    def mode_table(self) -> list[ModeEntry]:
        """Mode table for emission: the override, else the strategy default."""
        if self.modes is not None:
            return list(self.modes)
        strategy = self.strategy
        return list(DEFAULT_MODE_TABLES[strategy]) if strategy else []
