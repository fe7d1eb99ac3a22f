"""
Trace models - the result of following alias chains.

A TokenTrace holds one ModeTrace per processed mode. Each ModeTrace is
exactly one of: a final leaf value, an alias target with the nested
trace of that target, or an error. Errors are data, never raised, so a
broken chain does not abort sibling resolutions.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from solstice_tokens.models.token import LeafValue


class TraceErrorKind(str, Enum):
    """Resolution failures captured inside a trace."""

    TOKEN_NOT_FOUND = "token_not_found"
    MODE_NOT_FOUND = "mode_not_found"
    ALIAS_CYCLE_DETECTED = "alias_cycle_detected"
    ALIAS_UNRESOLVED = "alias_unresolved"


class TraceError(BaseModel):
    """A resolution failure."""

    kind: TraceErrorKind
    message: str

    model_config = {"frozen": True}


class ModeTrace(BaseModel):
    """Trace of one mode's value."""

    mode_id: str
    mode_name: str
    final_value: LeafValue | None = None
    alias_target: str | None = None
    chain: TokenTrace | None = None
    error: TraceError | None = None

    model_config = {"frozen": True}

    @property
    def is_leaf(self) -> bool:
        return self.final_value is not None

    @property
    def is_alias(self) -> bool:
        return self.alias_target is not None

    def resolve_leaf(self, preferred_mode: str | None = None) -> LeafValue | None:
        """
        Follow the chain to a leaf value.

        Args:
            preferred_mode: Mode id to prefer on each hop

        Returns:
            The leaf value, or None if the chain ends in an error
        """
        if self.error is not None:
            return None
        if self.final_value is not None:
            return self.final_value
        if self.chain is not None:
            return self.chain.resolve_leaf(preferred_mode)
        return None


class TokenTrace(BaseModel):
    """Trace of a token across its processed modes."""

    token: str
    source: str = ""
    resolved_type: str = ""
    modes: list[ModeTrace] = Field(default_factory=list)
    error: TraceError | None = None

    model_config = {"frozen": True}

    @classmethod
    def failed(cls, token: str, error: TraceError) -> TokenTrace:
        """Create a trace that failed before any mode was processed."""
        return cls(token=token, error=error)

    def mode(self, mode: str | None) -> ModeTrace | None:
        """Find a processed mode by id or display name."""
        if mode is None:
            return None
        for entry in self.modes:
            if mode in (entry.mode_id, entry.mode_name):
                return entry
        return None

    def resolve_leaf(self, preferred_mode: str | None = None) -> LeafValue | None:
        """
        Follow the trace to a leaf value.

        Uses the preferred mode when this token carries it, otherwise
        the first processed mode. Cross-mode hops are expected: a theme
        token usually points at a single-mode primitive.
        """
        if self.error is not None or not self.modes:
            return None
        entry = self.mode(preferred_mode) or self.modes[0]
        return entry.resolve_leaf(preferred_mode)

    def errors(self) -> list[TraceError]:
        """All errors in this trace and its nested chains."""
        found: list[TraceError] = []
        if self.error is not None:
            found.append(self.error)
        for entry in self.modes:
            if entry.error is not None:
                found.append(entry.error)
            if entry.chain is not None:
                found.extend(entry.chain.errors())
        return found


ModeTrace.model_rebuild()
TokenTrace.model_rebuild()
