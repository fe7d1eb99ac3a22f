"""
Token ordering for stylesheets.

Tokens are ordered by property category (from the first path segment),
then by a natural comparison of names. Unrecognized categories go last
in their original relative order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from solstice_tokens.constants import CATEGORY_ORDER, CATEGORY_RULES
from solstice_tokens.models.token import Token

_DIGITS_RE = re.compile(r"(\d+)")


def token_category(token_name: str) -> str | None:
    """Property category of a token name, or None if unrecognized."""
    first = token_name.split("/", 1)[0].lower()
    for category, substrings in CATEGORY_RULES:
        if any(s in first for s in substrings):
            return category
    return None


def natural_key(name: str) -> list[int | tuple[str, str]]:
    """
    Sort key comparing digit runs as integers.

    re.split with a capture group alternates text and digits, so every
    position holds the same type in any two keys.
    """
    parts = _DIGITS_RE.split(name)
    return [int(part) if i % 2 else (part.casefold(), part) for i, part in enumerate(parts)]


def sort_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Stable sort by category, then natural name order."""
    unknown = len(CATEGORY_ORDER)

    def key(token: Token) -> tuple[int, list[int | tuple[str, str]]]:
        category = token_category(token.name)
        if category is None:
            return (unknown, [])
        return (CATEGORY_ORDER.index(category), natural_key(token.name))

    return sorted(tokens, key=key)
