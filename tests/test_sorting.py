"""
Tests for stylesheet token ordering.
"""

from solstice_tokens.css import natural_key, sort_tokens, token_category
from solstice_tokens.models import Token


def names(tokens: list[Token]) -> list[str]:
    return [t.name for t in tokens]


def make(*token_names: str) -> list[Token]:
    return [Token(name=n) for n in token_names]


class TestTokenCategory:
    """Tests for category detection."""

    def test_known_categories(self):
        assert token_category("color/brand/amber-500") == "color"
        assert token_category("surface/base/default") == "color"
        assert token_category("spacing/4") == "spacing"
        assert token_category("type/hero/size") == "typography"
        assert token_category("radius/sm") == "border"
        assert token_category("layout/columns") == "layout"
        assert token_category("button/primary/bg") == "component"

    def test_case_insensitive(self):
        assert token_category("Elevation/2") == "elevation"

    def test_unknown(self):
        assert token_category("misc/thing") is None


class TestNaturalSort:
    """Tests for natural name ordering."""

    def test_numeric_runs(self):
        """Digit runs compare as numbers."""
        tokens = make("amber-1000", "amber-50", "amber-500", "amber-100")
        assert names(sort_tokens(tokens)) == ["amber-50", "amber-100", "amber-500", "amber-1000"]

    def test_case_insensitive(self):
        """Letters compare case-insensitively."""
        tokens = make("color/Zinc", "color/apple")
        assert names(sort_tokens(tokens)) == ["color/apple", "color/Zinc"]

    def test_key_shape(self):
        assert natural_key("a10b") == [("a", "a"), 10, ("b", "b")]


class TestSortTokens:
    """Tests for category-then-name ordering."""

    def test_category_order(self):
        """Color first, then elevation, spacing, typography, border, layout."""
        tokens = make("layout/columns", "radius/sm", "type/body", "spacing/4", "elevation/1", "color/a")
        assert names(sort_tokens(tokens)) == [
            "color/a",
            "elevation/1",
            "spacing/4",
            "type/body",
            "radius/sm",
            "layout/columns",
        ]

    def test_unknown_last_in_original_order(self):
        """Unrecognized categories go last, keeping their input order."""
        tokens = make("zeta/b", "color/x", "alpha/a", "spacing/1")
        assert names(sort_tokens(tokens)) == ["color/x", "spacing/1", "zeta/b", "alpha/a"]

    def test_sizing_between_spacing_and_typography(self):
        """size, width and height tokens sit after spacing, before typography."""
        tokens = make("typography/body", "height/row", "size/icon-24", "spacing/4", "width/panel")
        assert names(sort_tokens(tokens)) == [
            "spacing/4",
            "height/row",
            "size/icon-24",
            "width/panel",
            "typography/body",
        ]

    def test_compound_sizes_keep_category(self):
        assert token_category("lineHeight/body") == "typography"
        assert token_category("borderWidth/thin") == "border"
        assert token_category("size/icon-24") == "sizing"

    def test_deterministic(self):
        """Sorting is independent of input order for known categories."""
        first = make("spacing/10", "spacing/2", "color/b", "color/a")
        second = list(reversed(first))
        assert names(sort_tokens(first)) == names(sort_tokens(second))
