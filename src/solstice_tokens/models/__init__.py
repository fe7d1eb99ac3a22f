"""
Pydantic models for the token pipeline.

This module provides:
- Token: Named design value with per-mode values
- TokenValue: Leaf literals (color, number, string, boolean) or an alias
- TokenTrace / ModeTrace: Results of following alias chains
- GeneratorSpec: Routing and emission configuration for one stylesheet
"""

from solstice_tokens.models.generator import (
    DEFAULT_MODE_TABLES,
    CollectionRef,
    GeneratorSpec,
    ModeEntry,
)
from solstice_tokens.models.token import (
    AliasValue,
    BooleanValue,
    ColorValue,
    LeafValue,
    NumberValue,
    StringValue,
    Token,
    TokenValue,
    mode_collection,
    parse_value,
)
from solstice_tokens.models.trace import (
    ModeTrace,
    TokenTrace,
    TraceError,
    TraceErrorKind,
)

__all__ = [
    "DEFAULT_MODE_TABLES",
    "AliasValue",
    "BooleanValue",
    "CollectionRef",
    "ColorValue",
    "GeneratorSpec",
    "LeafValue",
    "ModeEntry",
    "ModeTrace",
    "NumberValue",
    "StringValue",
    "Token",
    "TokenTrace",
    "TokenValue",
    "TraceError",
    "TraceErrorKind",
    "mode_collection",
    "parse_value",
]
