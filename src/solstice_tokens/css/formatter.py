"""
Value formatter - converts leaf values to CSS literal text.

Formatting depends on the token name as well as the value: numbers pick
their unit from a policy table keyed by name substrings, and font names
are always quoted.
"""

from __future__ import annotations

import math

from solstice_tokens.constants import (
    DEFAULT_NUMBER_UNIT,
    QUOTE_TRIGGERS,
    QUOTED_NAME_HINTS,
    UNIT_RULES,
)
from solstice_tokens.css.naming import css_var_reference
from solstice_tokens.models.token import (
    ColorValue,
    LeafValue,
    NumberValue,
    StringValue,
    TokenValue,
)


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive values (builtin round() is banker's)."""
    return int(math.floor(x + 0.5))


def _hex_byte(component: float) -> str:
    return f"{round_half_up(component * 255):02x}"


def format_number(value: int | float) -> str:
    """Plain number text; integral floats print without a decimal point."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


class ValueFormatter:
    """
    Formats leaf values as CSS literals.

    The unit policy is a list of (name substrings, unit) rules checked in
    order against the lower-cased token name; the first match wins.
    """

    def __init__(
        self,
        unit_rules: list[tuple[tuple[str, ...], str]] | None = None,
        default_unit: str = DEFAULT_NUMBER_UNIT,
    ):
        self.unit_rules = unit_rules if unit_rules is not None else UNIT_RULES
        self.default_unit = default_unit

    def format(self, value: LeafValue | TokenValue, token_name: str = "") -> str:
        """
        Format a leaf value.

        Args:
            value: Leaf value to format
            token_name: Name of the token the value belongs to

        Returns:
            CSS literal text

        Raises:
            TypeError: If given an alias, which must be resolved first
        """
        if value.kind == "color":
            return self.format_color(value)
        if value.kind == "number":
            return self.format_number(value, token_name)
        if value.kind == "string":
            return self.format_string(value, token_name)
        if value.kind == "boolean":
            return "true" if value.value else "false"
        raise TypeError(f"Cannot format unresolved {value.kind} value for '{token_name}'")

    def format_color(self, color: ColorValue) -> str:
        """#rrggbb when opaque, #rrggbbaa otherwise."""
        rgb = _hex_byte(color.r) + _hex_byte(color.g) + _hex_byte(color.b)
        alpha = round_half_up(color.a * 100) / 100
        if alpha >= 1:
            return f"#{rgb}"
        return f"#{rgb}{_hex_byte(alpha)}"

    def format_number(self, number: NumberValue, token_name: str = "") -> str:
        return f"{format_number(number.value)}{self.unit_for(token_name)}"

    def format_string(self, string: StringValue, token_name: str = "") -> str:
        text = string.value
        lowered = token_name.lower()
        if (
            any(hint in lowered for hint in QUOTED_NAME_HINTS)
            or any(ch.isspace() for ch in text)
            or any(ch in text for ch in QUOTE_TRIGGERS)
        ):
            escaped = text.replace("\\", "\\\\").replace('"', '\\"')
            # CSS strings cannot span lines
            escaped = escaped.replace("\n", "\\a ")
            return f'"{escaped}"'
        return text

    def unit_for(self, token_name: str) -> str:
        """Unit suffix for a numeric token."""
        lowered = token_name.lower()
        for substrings, unit in self.unit_rules:
            if any(s in lowered for s in substrings):
                return unit
        return self.default_unit

    def reference(self, token_name: str) -> str:
        """Symbolic reference to another token's custom property."""
        return css_var_reference(token_name)
