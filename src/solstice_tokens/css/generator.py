"""
Stylesheet Generator - runs generators and writes CSS files.

The pipeline per generator:
    all tokens → route (patterns, collections, classifier fallback)
    → sort (category, natural order) → emit (strategy function) → file

A failing generator, or one naming an unknown strategy, is logged and
skipped; the remaining generators still run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from solstice_tokens.css.emitters import EMITTERS, EmitContext
from solstice_tokens.css.sorting import sort_tokens
from solstice_tokens.errors import UnknownStrategyError
from solstice_tokens.models.generator import GeneratorSpec
from solstice_tokens.models.token import Token
from solstice_tokens.resolver.alias import AliasResolver
from solstice_tokens.routing.router import TokenRouter
from solstice_tokens.store.loader import TokenStore

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result of running one generator."""

    generator_id: str
    css: str
    token_count: int
    declaration_count: int
    target_path: Path | None = None

    @property
    def written(self) -> bool:
        return self.target_path is not None


class StylesheetGenerator:
    """
    Produces one stylesheet per generator spec.

    All inputs are loaded and immutable before generation starts, so
    output is byte-identical across runs for identical inputs.
    """

    def __init__(
        self,
        store: TokenStore,
        resolver: AliasResolver,
        router: TokenRouter,
    ):
        """
        Initialize the generator.

        Args:
            store: Loaded tokens
            resolver: Alias resolver over the same store
            router: Router (its classifier also filters static output)
        """
        self.store = store
        self.resolver = resolver
        self.router = router

    def route(self, spec: GeneratorSpec) -> list[Token]:
        """Routed and sorted tokens for a generator."""
        return sort_tokens(self.router.route(spec, self.store))

    def build(self, spec: GeneratorSpec) -> GenerationResult:
        """
        Emit one stylesheet in memory.

        Raises:
            UnknownStrategyError: If the generator names an unknown strategy
        """
        strategy = spec.strategy
        if strategy is None:
            raise UnknownStrategyError(spec.emission_strategy, spec.id)

        tokens = self.route(spec)
        context = EmitContext(
            title=spec.display_name,
            resolver=self.resolver,
            classifier=self.router.classifier,
        )
        css = EMITTERS[strategy](tokens, spec.mode_table(), context)

        return GenerationResult(
            generator_id=spec.id,
            css=css,
            token_count=len(tokens),
            declaration_count=css.count(";\n"),
        )

    def write(self, spec: GeneratorSpec, output_dir: Path) -> GenerationResult:
        """
        Emit one stylesheet and write it under output_dir.

        Parent directories of the target file are created as needed.
        """
        result = self.build(spec)
        target = output_dir / spec.target_file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(result.css, encoding="utf-8")
        result.target_path = target
        return result

    def generate_all(
        self,
        specs: Iterable[GeneratorSpec],
        output_dir: Path | None = None,
    ) -> list[GenerationResult]:
        """
        Run every generator, skipping any that fail.

        Args:
            specs: Generators in emission order
            output_dir: Where to write files; None keeps output in memory

        Returns:
            Results of the generators that succeeded
        """
        results: list[GenerationResult] = []

        for spec in specs:
            logger.info(f"Processing generator: {spec.display_name}")
            try:
                if output_dir is None:
                    result = self.build(spec)
                else:
                    result = self.write(spec, output_dir)
            except UnknownStrategyError as e:
                logger.warning(f"{e}, skipping")
                continue
            except Exception:
                logger.exception(f"Generator '{spec.id}' failed, skipping")
                continue

            logger.info(f"  Found {result.token_count} tokens")
            if result.target_path is not None:
                logger.info(f"  Generated {result.target_path}")
            results.append(result)

        return results
