"""
Constants and enums for the token pipeline.

No magic strings - use enums and tables for collection ids, emission
strategies and mode tables.
"""

from enum import Enum


class Dimension(str, Enum):
    """Variation dimension a token participates in."""

    STATIC = "static"
    RESPONSIVE = "responsive"
    DENSITY = "density"
    THEME = "theme"


class ResolvedType(str, Enum):
    """Upstream resolved type of a token."""

    COLOR = "COLOR"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"


class EmissionStrategy(str, Enum):
    """
    Stylesheet emission strategies.

    Values are the names used in the routing document.
    """

    STATIC_ONCE = "staticOnce"
    RESPONSIVE = "backingsPlusMappingWithMQ"
    DENSITY = "semanticTypography"
    THEME = "themeOnly"


# Upstream alias marker on raw values
ALIAS_TYPE = "VARIABLE_ALIAS"

# Collection id -> dimension (the prefix of every mode id)
DENSITY_COLLECTION = "24109"
RESPONSIVE_COLLECTION = "13263"
THEME_COLLECTION = "2403"
BRAND_THEME_COLLECTION = "23394"

DEFAULT_COLLECTIONS: dict[str, Dimension] = {
    DENSITY_COLLECTION: Dimension.DENSITY,
    RESPONSIVE_COLLECTION: Dimension.RESPONSIVE,
    THEME_COLLECTION: Dimension.THEME,
    BRAND_THEME_COLLECTION: Dimension.THEME,
}

# Dimension each strategy emits, used for classifier fallback routing
STRATEGY_DIMENSIONS: dict[EmissionStrategy, Dimension] = {
    EmissionStrategy.STATIC_ONCE: Dimension.STATIC,
    EmissionStrategy.RESPONSIVE: Dimension.RESPONSIVE,
    EmissionStrategy.DENSITY: Dimension.DENSITY,
    EmissionStrategy.THEME: Dimension.THEME,
}

# Header label written at the top of each stylesheet
STRATEGY_LABELS: dict[EmissionStrategy, str] = {
    EmissionStrategy.STATIC_ONCE: "Static Once",
    EmissionStrategy.RESPONSIVE: "Backings Plus Mapping With MQ",
    EmissionStrategy.DENSITY: "Semantic Typography",
    EmissionStrategy.THEME: "Theme Only",
}

# Mode tables: (name, mode id, selector or media query)
BREAKPOINTS: list[tuple[str, str, str]] = [
    ("mobile-Small", "13263:0", "@media (min-width: 320px)"),
    ("mobile-Default", "13263:1", "@media (min-width: 400px)"),
    ("mobile-Large", "13263:2", "@media (min-width: 520px)"),
    ("tablet-Small", "13263:3", "@media (min-width: 624px)"),
    ("tablet-Default", "13263:4", "@media (min-width: 780px)"),
    ("tablet-Large", "13263:5", "@media (min-width: 980px)"),
    ("laptop-Small", "13263:6", "@media (min-width: 1220px)"),
    ("laptop-Default", "13263:7", "@media (min-width: 1460px)"),
    ("laptop-Large", "13263:8", "@media (min-width: 1700px)"),
    ("desktop-default", "13263:9", "@media (min-width: 1920px)"),
    ("desktop-large", "13263:10", "@media (min-width: 2200px)"),
    ("desktop-extraLarge", "13263:11", "@media (min-width: 2400px)"),
]

DENSITY_LEVELS: list[tuple[str, str, str]] = [
    ("low", "24109:0", '[data-density="low"]'),
    ("medium", "24109:3", '[data-density="medium"]'),
    ("high", "24109:4", '[data-density="high"]'),
]

THEMES: list[tuple[str, str, str]] = [
    ("JLL Light", "2403:0", ":root"),
    ("JLL Dark", "2403:1", '[data-theme="dark"]'),
    ("Lasalle Light", "23394:0", '[data-brand="lasalle"]'),
    ("Lasalle Dark", "23394:1", '[data-brand="lasalle"][data-theme="dark"]'),
]

STATIC_ROOT: list[tuple[str, str | None, str]] = [
    ("root", None, ":root"),
]

# Human-readable mode names used by the trace utility
MODE_NAMES: dict[str, str] = {
    "2403:0": "JLL Light",
    "2403:1": "JLL Dark",
    "23394:0": "Lasalle Light",
    "23394:1": "Lasalle Dark",
    "13263:0": "Mobile Small (320px)",
    "13263:1": "Mobile Default (400px)",
    "13263:2": "Mobile Large (520px)",
    "13263:3": "Tablet Small (624px)",
    "13263:4": "Tablet Default (780px)",
    "13263:5": "Tablet Large (980px)",
    "13263:6": "Laptop Small (1220px)",
    "13263:7": "Laptop Default (1460px)",
    "13263:8": "Laptop Large (1700px)",
    "13263:9": "Desktop Default (1920px)",
    "13263:10": "Desktop Large (2200px)",
    "13263:11": "Desktop Extra Large (2400px)",
}

# Number unit policy: first rule whose substring occurs in the
# lower-cased token name wins
UNIT_RULES: list[tuple[tuple[str, ...], str]] = [
    (("weight", "columns"), ""),
    (("radius", "spacing", "typesize"), "px"),
]
DEFAULT_NUMBER_UNIT = "px"

# Names that always get quoted string values
QUOTED_NAME_HINTS: tuple[str, ...] = ("typeface", "font")

# Characters that force quoting of other string values (whitespace also does)
QUOTE_TRIGGERS: tuple[str, ...] = (";", ",", "(", ")")

# Property categories, in stylesheet order. Matching is on the
# lower-cased first path segment; the first rule that matches wins.
CATEGORY_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("elevation", ("elevation",)),
    ("spacing", ("spacing", "margin", "padding", "gap", "micro", "static")),
    (
        "typography",
        ("type", "font", "typography", "lineheight", "letterspacing", "paragraphspacing"),
    ),
    ("border", ("radius", "border", "shadow", "blur", "projection")),
    ("layout", ("layout", "grid", "columns", "gutter", "breakpoint")),
    ("component", ("comp", "button", "field", "navigation")),
    ("core", ("core",)),
    ("scale", ("scale",)),
    ("basics", ("basics",)),
    # After typography and border: lineHeight and borderWidth belong there
    ("sizing", ("size", "width", "height")),
    (
        "color",
        (
            "color",
            "background",
            "surface",
            "text",
            "icon",
            "stroke",
            "brand",
            "tonal",
            "action",
            "amber",
            "glacier",
            "royal",
            "orange",
            "sand",
            "lasalle",
            "watercourse",
            "violet",
            "science",
            "salem",
            "ocean",
            "magenta",
            "lima",
            "lilac",
            "lavender",
            "jllred",
            "grayscale",
            "forest",
            "crimson",
            "clay",
            "bahama",
            "atoll",
        ),
    ),
]

CATEGORY_ORDER: list[str] = [
    "color",
    "elevation",
    "spacing",
    "sizing",
    "typography",
    "border",
    "layout",
    "component",
    "core",
    "scale",
    "basics",
]

# Default file layout, relative to the working directory
CONFIG_FILENAME = "solstice.yaml"
CONFIG_ENV_VAR = "SOLSTICE_CONFIG"
DEFAULT_DATASETS: list[tuple[str, str]] = [
    ("core-primitives", "raw/core-primitives/tokens-merged.json"),
    ("density-system", "raw/density-system/tokens-merged.json"),
    ("color-themes", "raw/color-themes/tokens-merged.json"),
]
DEFAULT_DIRECT_ID_MAPPING = "raw/direct-id-mapping.json"
DEFAULT_KEY_MAPPING = "raw/key-mapping.json"


class ErrorMessages:
    """Standardized error messages."""

    TOKEN_NOT_FOUND = "Token not found: {name}"
    MODE_NOT_FOUND = "Mode not found: {mode}"
    ALIAS_CYCLE = "Alias cycle detected: {name}"
    ALIAS_UNRESOLVED = "Unresolved alias: {alias_id}"
    COLLECTION_NOT_FOUND = "Collection '{collection}' not found for generator '{generator}'"
    MISSING_SOURCE_FILE = "Required source file not found: {path}"
    UNKNOWN_STRATEGY = "Unknown emission strategy '{strategy}' for generator '{generator}'"
    GENERATOR_NOT_FOUND = "Generator '{generator}' not found."
