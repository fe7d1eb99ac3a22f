"""Human-readable rendering of alias traces."""

from __future__ import annotations

import json

from solstice_tokens.models.trace import TokenTrace


def format_trace(trace: TokenTrace, indent: int = 0) -> str:
    """
    Render a trace as an indented tree.

    Example:
        📦 surface/base/default (color-themes, COLOR)
          🎨 JLL Light:
            🔗 alias to color/brand/amber-500
            📦 color/brand/amber-500 (core-primitives, COLOR)
              🎨 1:0:
                ✅ {"r": 1.0, "g": 0.6, "b": 0.0, "a": 1.0}
    """
    spaces = "  " * indent

    if trace.error is not None:
        return f"{spaces}❌ {trace.error.message}\n"

    lines = [f"{spaces}📦 {trace.token} ({trace.source}, {trace.resolved_type})\n"]

    for entry in trace.modes:
        lines.append(f"{spaces}  🎨 {entry.mode_name}:\n")

        if entry.alias_target is not None:
            lines.append(f"{spaces}    🔗 alias to {entry.alias_target}\n")

        if entry.error is not None:
            lines.append(f"{spaces}    ❌ {entry.error.message}\n")
        elif entry.final_value is not None:
            lines.append(f"{spaces}    ✅ {json.dumps(entry.final_value.to_raw())}\n")
        elif entry.chain is not None:
            lines.append(format_trace(entry.chain, indent + 2))

    return "".join(lines)
