"""
Pipeline exceptions.

Alias resolution problems are not raised; they travel as TraceError data
inside a trace. These exceptions cover loading and routing.
"""

from __future__ import annotations

from pathlib import Path

from solstice_tokens.constants import ErrorMessages


class TokenPipelineError(Exception):
    """Base class for pipeline errors."""


class MissingSourceFileError(TokenPipelineError):
    """A required dataset or mapping file does not exist. Fatal."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(ErrorMessages.MISSING_SOURCE_FILE.format(path=path))


class CollectionNotFoundError(TokenPipelineError):
    """A generator declares a collection no loaded token carries."""

    def __init__(self, collection: str, generator: str):
        self.collection = collection
        self.generator = generator
        super().__init__(
            ErrorMessages.COLLECTION_NOT_FOUND.format(collection=collection, generator=generator)
        )


class UnknownStrategyError(TokenPipelineError):
    """A generator names an emission strategy that does not exist."""

    def __init__(self, strategy: str, generator: str):
        self.strategy = strategy
        self.generator = generator
        super().__init__(
            ErrorMessages.UNKNOWN_STRATEGY.format(strategy=strategy, generator=generator)
        )


class RegistryError(TokenPipelineError):
    """The routing document is malformed."""
