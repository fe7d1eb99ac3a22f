"""
Token model - named design values with per-mode values.

A token value is a tagged union: a leaf literal (color, number, string,
boolean) or an alias pointing at another token. Raw upstream JSON is
converted with parse_value; resolution code switches on `kind`.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

from solstice_tokens.constants import ALIAS_TYPE, ResolvedType

# Alias ids embed the derived key: "VariableID:<key>/<local id>"
_ALIAS_KEY_RE = re.compile(r"VariableID:([^/]+)/")


class ColorValue(BaseModel):
    """RGBA color with components in [0, 1]."""

    kind: Literal["color"] = "color"
    r: float = Field(..., ge=0, le=1)
    g: float = Field(..., ge=0, le=1)
    b: float = Field(..., ge=0, le=1)
    a: float = Field(1.0, ge=0, le=1)

    model_config = {"frozen": True}

    def to_raw(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


class NumberValue(BaseModel):
    """Numeric literal."""

    kind: Literal["number"] = "number"
    value: int | float

    model_config = {"frozen": True}

    def to_raw(self) -> int | float:
        return self.value


class StringValue(BaseModel):
    """String literal."""

    kind: Literal["string"] = "string"
    value: str

    model_config = {"frozen": True}

    def to_raw(self) -> str:
        return self.value


class BooleanValue(BaseModel):
    """Boolean literal."""

    kind: Literal["boolean"] = "boolean"
    value: bool

    model_config = {"frozen": True}

    def to_raw(self) -> bool:
        return self.value


class AliasValue(BaseModel):
    """
    Reference to another token.

    The id is opaque but embeds a derived key usable as a fallback
    lookup when the id itself is not in the direct-id mapping.
    """

    kind: Literal["alias"] = "alias"
    id: str

    model_config = {"frozen": True}

    @property
    def key(self) -> str | None:
        """Derived key embedded in the id, if any."""
        match = _ALIAS_KEY_RE.match(self.id)
        return match.group(1) if match else None

    def to_raw(self) -> dict[str, str]:
        return {"type": ALIAS_TYPE, "id": self.id}


LeafValue = Annotated[
    ColorValue | NumberValue | StringValue | BooleanValue,
    Field(discriminator="kind"),
]

TokenValue = Annotated[
    ColorValue | NumberValue | StringValue | BooleanValue | AliasValue,
    Field(discriminator="kind"),
]


def parse_value(raw: Any) -> Any:
    """
    Convert a raw upstream value into the TokenValue union.

    Already-parsed models and dicts carrying a `kind` tag pass through
    unchanged so pydantic can validate them.

    Args:
        raw: Value as found in a dataset's `values` map

    Returns:
        A TokenValue model, or the input for pydantic to validate
    """
    if isinstance(raw, BaseModel):
        return raw
    # bool before number: bool is an int subclass
    if isinstance(raw, bool):
        return BooleanValue(value=raw)
    if isinstance(raw, (int, float)):
        return NumberValue(value=raw)
    if isinstance(raw, str):
        return StringValue(value=raw)
    if isinstance(raw, dict):
        if "kind" in raw:
            return raw
        if raw.get("type") == ALIAS_TYPE:
            return AliasValue(id=raw["id"])
        if {"r", "g", "b"} <= raw.keys():
            return ColorValue(r=raw["r"], g=raw["g"], b=raw["b"], a=raw.get("a", 1.0))
    raise ValueError(f"Unsupported token value: {raw!r}")


def mode_collection(mode_id: str) -> str:
    """Collection id prefix of a mode id ('2403:1' -> '2403')."""
    return mode_id.split(":", 1)[0]


class Token(BaseModel):
    """
    A named design value.

    Tokens are immutable once loaded; the name is the unique key
    across all loaded datasets.
    """

    name: str = Field(..., description="Hierarchical path, e.g. 'color/brand/amber-500'")
    source: str = Field("", description="Origin dataset tag")
    resolved_type: ResolvedType | str = Field("", alias="resolvedType")
    values: dict[str, TokenValue] = Field(
        default_factory=dict,
        description="Mode id -> value",
    )

    # Upstream metadata carried through for inspection
    id: str | None = None
    key: str | None = None
    description: str = ""
    scopes: list[str] = Field(default_factory=list)
    hidden_from_publishing: bool = Field(False, alias="hiddenFromPublishing")
    variable_collection_id: str | None = Field(None, alias="variableCollectionId")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator("values", mode="before")
    @classmethod
    def parse_values(cls, v: Any) -> Any:
        if v is None:
            return {}
        if isinstance(v, dict):
            return {mode_id: parse_value(raw) for mode_id, raw in v.items()}
        return v

    @field_validator("description", mode="before")
    @classmethod
    def none_description(cls, v: Any) -> Any:
        return v or ""

    def collection_ids(self) -> list[str]:
        """Collection id prefixes of every mode key, in value-map order."""
        return [mode_collection(mode_id) for mode_id in self.values]

    def value_for(self, mode_id: str) -> TokenValue | None:
        """Get the value at a mode id, or None if the token lacks it."""
        return self.values.get(mode_id)

    @property
    def type_name(self) -> str:
        """Resolved type as a plain string."""
        if isinstance(self.resolved_type, ResolvedType):
            return self.resolved_type.value
        return self.resolved_type
