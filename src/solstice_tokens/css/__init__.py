"""
CSS output - formatting, naming, ordering and stylesheet emission.

The pipeline:
    routed tokens → sort_tokens → emitter (per strategy) → CSS text
"""

# Formatting and naming first (no dependency on the resolver)
from solstice_tokens.css.formatter import ValueFormatter, format_number, round_half_up
from solstice_tokens.css.naming import css_var_name, css_var_reference, sanitize_css_var_name
from solstice_tokens.css.sorting import natural_key, sort_tokens, token_category


def __getattr__(name: str):
    """Lazy imports for emitters to avoid circular dependencies with the resolver."""
    if name in ("EMITTERS", "EmitContext", "GenerationResult", "StylesheetGenerator"):
        from solstice_tokens.css.emitters import EMITTERS, EmitContext
        from solstice_tokens.css.generator import GenerationResult, StylesheetGenerator

        return {
            "EMITTERS": EMITTERS,
            "EmitContext": EmitContext,
            "GenerationResult": GenerationResult,
            "StylesheetGenerator": StylesheetGenerator,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Emission (lazy loaded)
    "EMITTERS",
    "EmitContext",
    "GenerationResult",
    "StylesheetGenerator",
    # Formatting
    "ValueFormatter",
    "format_number",
    "round_half_up",
    # Naming
    "css_var_name",
    "css_var_reference",
    "sanitize_css_var_name",
    # Ordering
    "natural_key",
    "sort_tokens",
    "token_category",
]
