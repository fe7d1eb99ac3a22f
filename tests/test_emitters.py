"""
Tests for stylesheet emission.

Each emission strategy is exercised end to end over the sample graph
with the packaged generator registry.
"""

import pytest

from solstice_tokens.constants import EmissionStrategy
from solstice_tokens.css import EMITTERS, EmitContext, StylesheetGenerator
from solstice_tokens.models import GeneratorSpec, ModeEntry, Token
from solstice_tokens.resolver import AliasResolver
from solstice_tokens.routing import GeneratorRegistry, ModeClassifier, TokenRouter
from solstice_tokens.store import AliasIndex, TokenStore


@pytest.fixture
def registry() -> GeneratorRegistry:
    return GeneratorRegistry.from_file()


@pytest.fixture
def generator(store: TokenStore, resolver: AliasResolver, registry: GeneratorRegistry):
    return StylesheetGenerator(store, resolver, TokenRouter(ModeClassifier(registry.collection_map())))


def build(generator: StylesheetGenerator, registry: GeneratorRegistry, generator_id: str) -> str:
    return generator.build(registry.get_generator(generator_id)).css


class TestThemeOutput:
    """Tests for themeOnly output."""

    def test_single_theme_token(self):
        """A theme token with one literal mode lands in :root."""
        store = TokenStore.from_records(
            [
                {
                    "name": "color/brand/amber-500",
                    "values": {"2403:0": {"r": 1, "g": 0.6, "b": 0, "a": 1}},
                }
            ],
            "color-themes",
        )
        resolver = AliasResolver(store, AliasIndex())
        spec = GeneratorSpec(id="themes", target_file="t.css", emission_strategy="themeOnly")
        css = StylesheetGenerator(store, resolver, TokenRouter()).build(spec).css

        assert ":root {\n  --color-brand-amber-500: #ff9900;\n}\n" in css

    def test_aliases_flattened(self, generator: StylesheetGenerator, registry: GeneratorRegistry):
        """Theme values are followed to their leaves, per theme block."""
        css = build(generator, registry, "themes")
        assert css == (
            "/* Color Themes - Theme Only */\n"
            ":root {\n"
            "  --surface-base-default: #ff9900;\n"
            "  --text-primary: #1a1a1a;\n"
            "}\n\n"
            '[data-theme="dark"] {\n'
            "  --surface-base-default: #1a1a1a;\n"
            "}\n\n"
            '[data-brand="lasalle"] {\n'
            "  --text-primary: #ff9900;\n"
            "}\n\n"
            '[data-brand="lasalle"][data-theme="dark"] {\n'
            "}\n\n"
        )

    def test_broken_chain_omitted(self, generator: StylesheetGenerator, registry: GeneratorRegistry):
        """A token whose chain does not reach a leaf is left out."""
        css = build(generator, registry, "themes")
        assert "accent-strong" not in css
        assert "VariableID" not in css


class TestStaticOutput:
    """Tests for staticOnce output."""

    def test_primitives(self, generator: StylesheetGenerator, registry: GeneratorRegistry):
        css = build(generator, registry, "primitives")
        assert css == (
            "/* Core Primitives - Static Once */\n"
            ":root {\n"
            "  --color-brand-amber-500: #ff9900;\n"
            "  --color-neutral-900: #1a1a1a;\n"
            "  --spacing-4: 16px;\n"
            "  --radius-sm: 4px;\n"
            '  --core-font-family: "Source Sans Pro";\n'
            "}\n"
        )

    def test_dimensioned_tokens_skipped(self, resolver: AliasResolver):
        """Tokens with dimension modes never appear in static output."""
        tokens = [
            Token(name="spacing/1", values={"1:0": 4}),
            Token(name="spacing/2", values={"24109:0": 8}),
        ]
        ctx = EmitContext(title="Static", resolver=resolver, classifier=ModeClassifier())
        modes = [ModeEntry(name="root", selector=":root")]
        css = EMITTERS[EmissionStrategy.STATIC_ONCE](tokens, modes, ctx)
        assert "--spacing-1: 4px;" in css
        assert "spacing-2" not in css

    def test_alias_kept_symbolic(self, resolver: AliasResolver):
        """Static aliases stay one-level references."""
        tokens = [
            Token(
                name="spacing/default",
                values={"1:0": {"type": "VARIABLE_ALIAS", "id": "VariableID:spacingkey/1:3"}},
            )
        ]
        ctx = EmitContext(title="Static", resolver=resolver, classifier=ModeClassifier())
        modes = [ModeEntry(name="root", selector=":root")]
        css = EMITTERS[EmissionStrategy.STATIC_ONCE](tokens, modes, ctx)
        assert "  --spacing-default: var(--spacing-4);\n" in css


class TestResponsiveOutput:
    """Tests for backingsPlusMappingWithMQ output."""

    def test_media_query_blocks(self, generator: StylesheetGenerator, registry: GeneratorRegistry):
        css = build(generator, registry, "responsive")
        assert css.startswith("/* Responsive Layout - Backings Plus Mapping With MQ */\n")
        assert (
            "@media (min-width: 320px) {\n"
            "  :root {\n"
            "    --layout-columns: 4;\n"
            "    --misc-gutter: var(--spacing-4);\n"
            "  }\n"
            "}\n\n"
        ) in css
        assert (
            "@media (min-width: 980px) {\n"
            "  :root {\n"
            "    --layout-columns: 8;\n"
            "  }\n"
            "}\n\n"
        ) in css

    def test_every_breakpoint_emitted(self, generator: StylesheetGenerator, registry: GeneratorRegistry):
        css = build(generator, registry, "responsive")
        assert css.count("@media") == 12
        assert "@media (min-width: 2400px) {\n  :root {\n  }\n}\n\n" in css


class TestDensityOutput:
    """Tests for semanticTypography output."""

    def test_density_blocks(self, generator: StylesheetGenerator, registry: GeneratorRegistry):
        css = build(generator, registry, "density")
        assert css == (
            "/* Density Typography - Semantic Typography */\n"
            '[data-density="low"] {\n'
            "  --type-body-gap: var(--spacing-4);\n"
            "  --type-body-size: 14px;\n"
            "}\n\n"
            '[data-density="medium"] {\n'
            "  --type-body-gap: var(--spacing-4);\n"
            "  --type-body-size: 16px;\n"
            "}\n\n"
            '[data-density="high"] {\n'
            "  --type-body-gap: var(--spacing-4);\n"
            "  --type-body-size: 18px;\n"
            "}\n\n"
        )

    def test_unresolved_alias_omitted(self, resolver: AliasResolver):
        """One-level output never writes raw reference ids."""
        tokens = [
            Token(
                name="type/broken",
                values={"24109:0": {"type": "VARIABLE_ALIAS", "id": "VariableID:missingkey/0:0"}},
            )
        ]
        ctx = EmitContext(title="Density", resolver=resolver, classifier=ModeClassifier())
        spec = GeneratorSpec(id="d", target_file="d.css", emission_strategy="semanticTypography")
        css = EMITTERS[EmissionStrategy.DENSITY](tokens, spec.mode_table(), ctx)
        assert "type-broken" not in css
