"""CSS custom-property naming."""

from __future__ import annotations

import re

_SLASH_RE = re.compile(r"/")
_SPACE_RE = re.compile(r"\s+")
_PAREN_RE = re.compile(r"[()]")
_INVALID_RE = re.compile(r"[^\w-]", re.ASCII)
_HYPHENS_RE = re.compile(r"-+")


def sanitize_css_var_name(token_name: str) -> str:
    """
    Turn a token path into a custom-property name (without the leading --).

    'type/hero (large)/size' -> 'type-hero-large-size'
    """
    name = _SLASH_RE.sub("-", token_name)
    name = _SPACE_RE.sub("-", name)
    name = _PAREN_RE.sub("", name)
    name = _INVALID_RE.sub("", name)
    name = _HYPHENS_RE.sub("-", name)
    return name.strip("-")


def css_var_name(token_name: str) -> str:
    """Declaration name: '--' + sanitized token name."""
    return f"--{sanitize_css_var_name(token_name)}"


def css_var_reference(token_name: str) -> str:
    """Symbolic reference to another token: var(--name)."""
    return f"var({css_var_name(token_name)})"
