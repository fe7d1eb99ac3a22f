"""
Pytest configuration and shared fixtures.

The sample token graph spans all three datasets:
- core-primitives: single-mode palette, spacing, radius and font tokens
- density-system: density typography and responsive layout tokens
- color-themes: theme tokens aliasing the palette, plus one broken alias
"""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from solstice_tokens.resolver import AliasResolver
from solstice_tokens.store import AliasIndex, TokenStore

AMBER_ID = "VariableID:amberkey/1:1"
NEUTRAL_ID = "VariableID:neutralkey/1:2"
SPACING_ID = "VariableID:spacingkey/1:3"
MISSING_ID = "VariableID:missingkey/0:0"


def alias(alias_id: str) -> dict[str, str]:
    """Raw upstream alias value."""
    return {"type": "VARIABLE_ALIAS", "id": alias_id}


CORE_PRIMITIVES: list[dict[str, Any]] = [
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
    {"name": "spacing/4", "resolvedType": "FLOAT", "values": {"1:0": 16}},
    {"name": "radius/sm", "resolvedType": "FLOAT", "values": {"1:0": 4}},
    {"name": "core/font-family", "resolvedType": "STRING", "values": {"1:0": "Source Sans Pro"}},
]

DENSITY_SYSTEM: list[dict[str, Any]] = [
    {
        "name": "type/body/size",
        "resolvedType": "FLOAT",
        "values": {"24109:0": 14, "24109:3": 16, "24109:4": 18},
    },
    {
        "name": "type/body/gap",
        "resolvedType": "FLOAT",
        "values": {
            "24109:0": alias(SPACING_ID),
            "24109:3": alias(SPACING_ID),
            "24109:4": alias(SPACING_ID),
        },
    },
    {"name": "layout/columns", "resolvedType": "FLOAT", "values": {"13263:0": 4, "13263:5": 8}},
    {"name": "misc/gutter", "resolvedType": "FLOAT", "values": {"13263:0": alias(SPACING_ID)}},
]

COLOR_THEMES: list[dict[str, Any]] = [
    {
        "name": "surface/base/default",
        "resolvedType": "COLOR",
        "values": {"2403:0": alias(AMBER_ID), "2403:1": alias(NEUTRAL_ID)},
    },
    {
        "name": "text/primary",
        "resolvedType": "COLOR",
        "values": {"2403:0": alias(NEUTRAL_ID), "23394:0": alias(AMBER_ID)},
    },
    {"name": "accent/strong", "resolvedType": "COLOR", "values": {"2403:0": alias(MISSING_ID)}},
]

# Amber and spacing resolve by full id; neutral only through its derived key
DIRECT_IDS: dict[str, Any] = {
    AMBER_ID: {"name": "color/brand/amber-500"},
    SPACING_ID: {"name": "spacing/4"},
}
KEY_MAP: dict[str, Any] = {
    "neutralkey": {"name": "color/neutral/900"},
}


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store() -> TokenStore:
    """Store holding the full sample graph."""
    return TokenStore(
        [
            *TokenStore.from_records(CORE_PRIMITIVES, "core-primitives"),
            *TokenStore.from_records(DENSITY_SYSTEM, "density-system"),
            *TokenStore.from_records(COLOR_THEMES, "color-themes"),
        ]
    )


@pytest.fixture
def alias_index() -> AliasIndex:
    """Alias index for the sample graph."""
    return AliasIndex(DIRECT_IDS, KEY_MAP)


@pytest.fixture
def resolver(store: TokenStore, alias_index: AliasIndex) -> AliasResolver:
    """Resolver over the sample graph."""
    return AliasResolver(store, alias_index)


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Working directory laid out with the default raw/ inputs."""
    write_json(temp_dir / "raw" / "core-primitives" / "tokens-merged.json", CORE_PRIMITIVES)
    write_json(temp_dir / "raw" / "density-system" / "tokens-merged.json", DENSITY_SYSTEM)
    write_json(temp_dir / "raw" / "color-themes" / "tokens-merged.json", COLOR_THEMES)
    write_json(temp_dir / "raw" / "direct-id-mapping.json", DIRECT_IDS)
    write_json(temp_dir / "raw" / "key-mapping.json", KEY_MAP)
    return temp_dir
