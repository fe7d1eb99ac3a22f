"""
Alias resolver - follows alias chains through the token graph.

Two resolution shapes are needed by the emitters:
- one level: an alias becomes a var(--target) reference and the
  browser cascade does the rest (static, responsive, density)
- full chain: an alias is followed to its leaf literal (theme)

Traversal is cycle-safe: each recursive call receives its own copy of
the names on the current path, so a token may appear in two independent
chains but never twice in the same one.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from solstice_tokens.constants import MODE_NAMES, ErrorMessages
from solstice_tokens.css.formatter import ValueFormatter
from solstice_tokens.models.token import LeafValue, TokenValue
from solstice_tokens.models.trace import ModeTrace, TokenTrace, TraceError, TraceErrorKind
from solstice_tokens.store.aliases import AliasIndex
from solstice_tokens.store.loader import TokenStore

logger = logging.getLogger(__name__)


class AliasResolver:
    """
    Resolves token values against an immutable store and alias index.

    The resolver holds no mutable state, so traversals are re-entrant.
    """

    def __init__(
        self,
        store: TokenStore,
        index: AliasIndex,
        formatter: ValueFormatter | None = None,
        mode_names: Mapping[str, str] | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            store: Loaded tokens
            index: Alias lookup tables
            formatter: Leaf formatter (default ValueFormatter)
            mode_names: Mode id -> display name (default MODE_NAMES)
        """
        self.store = store
        self.index = index
        self.formatter = formatter or ValueFormatter()
        self.mode_names = mode_names if mode_names is not None else MODE_NAMES

    def mode_name(self, mode_id: str) -> str:
        """Display name of a mode id; unknown ids display as themselves."""
        return self.mode_names.get(mode_id, mode_id)

    def resolve_alias(self, value: TokenValue) -> str | None:
        """Target token name of an alias, or None for leaves and unknown references."""
        if value.kind != "alias":
            return None
        return self.index.lookup(value)

    def resolve_one_level(self, value: TokenValue, token_name: str = "") -> str:
        """
        Resolve a value without following the chain past one hop.

        Args:
            value: Leaf or alias value
            token_name: Owning token name (drives leaf formatting)

        Returns:
            A formatted literal for leaves, var(--target) for resolvable
            aliases, or the raw reference id as a degraded fallback
        """
        if value.kind != "alias":
            return self.formatter.format(value, token_name)

        target = self.index.lookup(value)
        if target is None:
            logger.debug(f"Unresolved alias in '{token_name}': {value.id}")
            return value.id
        return self.formatter.reference(target)

    def trace_chain(
        self,
        token_name: str,
        mode: str | None = None,
        visited: frozenset[str] = frozenset(),
    ) -> TokenTrace:
        """
        Trace a token's alias chains down to leaf values.

        Args:
            token_name: Token to trace
            mode: Optional mode filter, by display name or raw mode id
            visited: Names already on the current traversal path

        Returns:
            TokenTrace with one entry per processed mode. Failures are
            recorded as TraceError data, never raised.
        """
        token = self.store.get(token_name)
        if token is None:
            return TokenTrace.failed(
                token_name,
                TraceError(
                    kind=TraceErrorKind.TOKEN_NOT_FOUND,
                    message=ErrorMessages.TOKEN_NOT_FOUND.format(name=token_name),
                ),
            )

        modes = self._select_modes(token.values, mode)
        if modes is None:
            return TokenTrace.failed(
                token_name,
                TraceError(
                    kind=TraceErrorKind.MODE_NOT_FOUND,
                    message=ErrorMessages.MODE_NOT_FOUND.format(mode=mode),
                ),
            )

        path = visited | {token_name}
        entries = [self._trace_mode(mode_id, value, path) for mode_id, value in modes.items()]

        return TokenTrace(
            token=token.name,
            source=token.source,
            resolved_type=token.type_name,
            modes=entries,
        )

    def resolve_final(self, token_name: str, mode_id: str) -> LeafValue | None:
        """
        Resolve a token's value at a mode all the way to its leaf.

        Args:
            token_name: Token to resolve
            mode_id: Mode id whose value starts the chain

        Returns:
            The leaf value, or None if the chain errors out
        """
        trace = self.trace_chain(token_name, mode_id)
        if trace.error is not None:
            return None
        entry = trace.mode(mode_id)
        if entry is None:
            return None
        return entry.resolve_leaf(mode_id)

    def _select_modes(
        self,
        values: dict[str, TokenValue],
        mode: str | None,
    ) -> dict[str, TokenValue] | None:
        """Modes to process: all, or the one matching the filter; None if no match."""
        if mode is None:
            return values

        for mode_id, value in values.items():
            if self.mode_name(mode_id) == mode:
                return {mode_id: value}

        if mode in values:
            return {mode: values[mode]}

        return None

    def _trace_mode(self, mode_id: str, value: TokenValue, path: frozenset[str]) -> ModeTrace:
        mode_name = self.mode_name(mode_id)

        if value.kind != "alias":
            return ModeTrace(mode_id=mode_id, mode_name=mode_name, final_value=value)

        target = self.index.lookup(value)
        if target is None:
            return ModeTrace(
                mode_id=mode_id,
                mode_name=mode_name,
                error=TraceError(
                    kind=TraceErrorKind.ALIAS_UNRESOLVED,
                    message=ErrorMessages.ALIAS_UNRESOLVED.format(alias_id=value.id),
                ),
            )

        if target in path:
            return ModeTrace(
                mode_id=mode_id,
                mode_name=mode_name,
                alias_target=target,
                error=TraceError(
                    kind=TraceErrorKind.ALIAS_CYCLE_DETECTED,
                    message=ErrorMessages.ALIAS_CYCLE.format(name=target),
                ),
            )

        # Cross-mode references are expected, so the target is traced unfiltered
        return ModeTrace(
            mode_id=mode_id,
            mode_name=mode_name,
            alias_target=target,
            chain=self.trace_chain(target, None, path),
        )
