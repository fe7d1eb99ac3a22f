"""
Token pipeline - wires the components for one run.

Everything is loaded once, synchronously, before any resolution or
emission: datasets, alias mappings and the routing document. A missing
required input aborts here, before any stylesheet is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solstice_tokens.config import PipelineConfig
from solstice_tokens.css.formatter import ValueFormatter
from solstice_tokens.css.generator import GenerationResult, StylesheetGenerator
from solstice_tokens.models.trace import TokenTrace
from solstice_tokens.resolver.alias import AliasResolver
from solstice_tokens.routing.classifier import ModeClassifier
from solstice_tokens.routing.registry import GeneratorRegistry
from solstice_tokens.routing.router import TokenRouter
from solstice_tokens.store.aliases import AliasIndex
from solstice_tokens.store.loader import TokenStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPipeline:
    """The loaded token graph and the components that read it."""

    config: PipelineConfig
    store: TokenStore
    aliases: AliasIndex
    registry: GeneratorRegistry
    classifier: ModeClassifier
    resolver: AliasResolver
    router: TokenRouter
    generator: StylesheetGenerator

    @classmethod
    def load(cls, config: PipelineConfig) -> TokenPipeline:
        """
        Load all inputs and build the components.

        Raises:
            MissingSourceFileError: If a required input is missing
        """
        store = TokenStore.from_datasets(config.resolved_datasets())
        aliases = AliasIndex.from_files(
            config.resolve(config.direct_id_mapping),
            config.resolve(config.key_mapping),
        )
        registry = GeneratorRegistry.from_file(config.registry_path)
        return cls.assemble(config, store, aliases, registry)

    @classmethod
    def assemble(
        cls,
        config: PipelineConfig,
        store: TokenStore,
        aliases: AliasIndex,
        registry: GeneratorRegistry,
    ) -> TokenPipeline:
        """Build the components over already-loaded inputs."""
        classifier = ModeClassifier(registry.collection_map())
        resolver = AliasResolver(store, aliases, ValueFormatter())
        router = TokenRouter(classifier)
        generator = StylesheetGenerator(store, resolver, router)

        logger.info(f"Token pipeline ready: {len(store)} tokens, {len(registry)} generators")
        return cls(
            config=config,
            store=store,
            aliases=aliases,
            registry=registry,
            classifier=classifier,
            resolver=resolver,
            router=router,
            generator=generator,
        )

    def trace(self, token_name: str, mode: str | None = None) -> TokenTrace:
        """Trace a token's alias chain."""
        return self.resolver.trace_chain(token_name, mode)

    def generate_all(self, write: bool = True) -> list[GenerationResult]:
        """Run every registered generator."""
        output_dir = self.config.output_path if write else None
        return self.generator.generate_all(self.registry.list_generators(), output_dir)
