#!/usr/bin/env python3
"""
Example: Tracing alias chains.

This builds a small token graph in memory - a palette primitive and a
theme token that points at it - and shows how the resolver follows the
chain, mode by mode, and what happens when a reference is broken.

Usage:
    python examples/trace_token.py
"""

from solstice_tokens.resolver import AliasResolver, format_trace
from solstice_tokens.store import AliasIndex, TokenStore


def alias(alias_id: str) -> dict[str, str]:
    return {"type": "VARIABLE_ALIAS", "id": alias_id}


def main() -> None:
    """Demonstrate alias tracing."""
    print("Solstice Tokens Alias Tracing Demo")
    print("=" * 40)
    print()

    primitives = TokenStore.from_records(
        [
            {
                "name": "color/brand/amber-500",
                "resolvedType": "COLOR",
                "values": {"1:0": {"r": 1, "g": 0.6, "b": 0, "a": 1}},
            },
            {
                "name": "color/neutral/900",
                "resolvedType": "COLOR",
                "values": {"1:0": {"r": 0.1, "g": 0.1, "b": 0.1, "a": 1}},
            },
        ],
        source="core-primitives",
    )
    themes = TokenStore.from_records(
        [
            {
                "name": "surface/base/default",
                "resolvedType": "COLOR",
                "values": {
                    "2403:0": alias("VariableID:amber/1:1"),
                    "2403:1": alias("VariableID:neutral/1:2"),
                    "23394:0": alias("VariableID:gone/9:9"),
                },
            },
        ],
        source="color-themes",
    )
    store = TokenStore([*primitives, *themes])

    # Amber resolves by full id, neutral only by the key embedded in its id
    index = AliasIndex(
        {"VariableID:amber/1:1": {"name": "color/brand/amber-500"}},
        {"neutral": {"name": "color/neutral/900"}},
    )
    resolver = AliasResolver(store, index)

    print("Full trace:")
    print(format_trace(resolver.trace_chain("surface/base/default")))

    print("One mode only (JLL Dark):")
    print(format_trace(resolver.trace_chain("surface/base/default", "JLL Dark")))

    print("Resolved values:")
    for mode_id in ("2403:0", "2403:1", "23394:0"):
        leaf = resolver.resolve_final("surface/base/default", mode_id)
        shown = resolver.formatter.format(leaf) if leaf is not None else "(unresolved)"
        print(f"  {resolver.mode_name(mode_id)}: {shown}")

    value = store.get("surface/base/default").value_for("2403:0")
    print()
    print(f"One level: {resolver.resolve_one_level(value, 'surface/base/default')}")


if __name__ == "__main__":
    main()
