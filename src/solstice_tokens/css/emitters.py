"""
Stylesheet emitters - one plain function per emission strategy.

Each emitter takes the routed, sorted tokens and a mode table and
returns one CSS document. Static, responsive and density output keep
one level of indirection (var(--target)) so the browser cascade does
the final substitution; theme output is flattened to leaf literals.

A token/mode pair that cannot be resolved is omitted rather than
written as invalid CSS.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from solstice_tokens.constants import STRATEGY_LABELS, EmissionStrategy
from solstice_tokens.css.naming import css_var_name
from solstice_tokens.models.generator import ModeEntry
from solstice_tokens.models.token import Token, TokenValue
from solstice_tokens.resolver.alias import AliasResolver
from solstice_tokens.routing.classifier import ModeClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmitContext:
    """What an emitter needs besides tokens and modes."""

    title: str
    resolver: AliasResolver
    classifier: ModeClassifier


Emitter = Callable[[Sequence[Token], Sequence[ModeEntry], EmitContext], str]


def _header(ctx: EmitContext, strategy: EmissionStrategy) -> str:
    return f"/* {ctx.title} - {STRATEGY_LABELS[strategy]} */\n"


def _declaration(token_name: str, value: str, indent: str) -> str:
    return f"{indent}{css_var_name(token_name)}: {value};\n"


def _one_level(token: Token, value: TokenValue, ctx: EmitContext) -> str | None:
    """One-hop resolution, or None when an alias has no known target."""
    if value.kind == "alias" and ctx.resolver.resolve_alias(value) is None:
        logger.debug(f"Omitting '{token.name}': unresolved alias {value.id}")
        return None
    return ctx.resolver.resolve_one_level(value, token.name)


def _static_value(token: Token, entry: ModeEntry, ctx: EmitContext) -> str | None:
    if not token.values:
        # No mode key: use the first leaf or alias target an unfiltered trace finds
        trace = ctx.resolver.trace_chain(token.name)
        for mode in trace.modes:
            if mode.error is not None:
                continue
            if mode.alias_target is not None:
                return ctx.resolver.formatter.reference(mode.alias_target)
            if mode.final_value is not None:
                return ctx.resolver.formatter.format(mode.final_value, token.name)
        return None

    if entry.mode_id is not None:
        value = token.value_for(entry.mode_id)
    else:
        value = next(iter(token.values.values()))
    if value is None:
        return None
    return _one_level(token, value, ctx)


def emit_static(tokens: Sequence[Token], modes: Sequence[ModeEntry], ctx: EmitContext) -> str:
    """Single :root block of tokens without a recognized dimension."""
    css = [_header(ctx, EmissionStrategy.STATIC_ONCE)]

    for entry in modes:
        css.append(f"{entry.selector} {{\n")
        for token in tokens:
            if not ctx.classifier.classify(token).is_static:
                logger.debug(f"Skipping '{token.name}' in static output: has dimension modes")
                continue
            value = _static_value(token, entry, ctx)
            if value is not None:
                css.append(_declaration(token.name, value, "  "))
        css.append("}\n")

    return "".join(css)


def emit_responsive(
    tokens: Sequence[Token], modes: Sequence[ModeEntry], ctx: EmitContext
) -> str:
    """One media query per breakpoint, each wrapping a :root block."""
    css = [_header(ctx, EmissionStrategy.RESPONSIVE)]

    for entry in modes:
        css.append(f"{entry.selector} {{\n")
        css.append("  :root {\n")
        for token in tokens:
            value = token.value_for(entry.mode_id) if entry.mode_id else None
            if value is None:
                continue
            resolved = _one_level(token, value, ctx)
            if resolved is not None:
                css.append(_declaration(token.name, resolved, "    "))
        css.append("  }\n")
        css.append("}\n\n")

    return "".join(css)


def emit_density(tokens: Sequence[Token], modes: Sequence[ModeEntry], ctx: EmitContext) -> str:
    """One [data-density] block per density level."""
    css = [_header(ctx, EmissionStrategy.DENSITY)]

    for entry in modes:
        css.append(f"{entry.selector} {{\n")
        for token in tokens:
            value = token.value_for(entry.mode_id) if entry.mode_id else None
            if value is None:
                continue
            resolved = _one_level(token, value, ctx)
            if resolved is not None:
                css.append(_declaration(token.name, resolved, "  "))
        css.append("}\n\n")

    return "".join(css)


def emit_theme(tokens: Sequence[Token], modes: Sequence[ModeEntry], ctx: EmitContext) -> str:
    """One theme/brand selector block per theme, values flattened to leaves."""
    css = [_header(ctx, EmissionStrategy.THEME)]

    for entry in modes:
        css.append(f"{entry.selector} {{\n")
        for token in tokens:
            if entry.mode_id is None or token.value_for(entry.mode_id) is None:
                continue
            leaf = ctx.resolver.resolve_final(token.name, entry.mode_id)
            if leaf is None:
                logger.debug(f"Omitting '{token.name}' in {entry.name}: chain has no leaf")
                continue
            value = ctx.resolver.formatter.format(leaf, token.name)
            css.append(_declaration(token.name, value, "  "))
        css.append("}\n\n")

    return "".join(css)


EMITTERS: dict[EmissionStrategy, Emitter] = {
    EmissionStrategy.STATIC_ONCE: emit_static,
    EmissionStrategy.RESPONSIVE: emit_responsive,
    EmissionStrategy.DENSITY: emit_density,
    EmissionStrategy.THEME: emit_theme,
}
