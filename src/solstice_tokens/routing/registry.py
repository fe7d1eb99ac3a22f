"""
Generator Registry - loads the routing document.

The routing document lists one entry per output stylesheet:

    generators:
      - id: themes
        name: Color Themes
        targetFile: dist/css/themes.css
        emissionStrategy: themeOnly
        sourceFilter: color-themes
        patterns: ["surface/*", "text/*"]
        collections:
          - {id: "2403", dimension: theme}

YAML or JSON is accepted. A packaged default registry ships with the
library.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from solstice_tokens.constants import DEFAULT_COLLECTIONS, Dimension
from solstice_tokens.errors import MissingSourceFileError, RegistryError
from solstice_tokens.models.generator import GeneratorSpec

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_PATH = Path(__file__).parent.parent / "data" / "generator-registry.yaml"


class GeneratorRegistry:
    """
    Holds generator specs in document order.

    Entries that fail validation are logged and skipped; the rest of the
    document still loads.
    """

    def __init__(self, generators: list[GeneratorSpec] | None = None):
        """
        Initialize the registry.

        Args:
            generators: Generator specs in emission order
        """
        self._generators: dict[str, GeneratorSpec] = {}
        for spec in generators or []:
            self.register_generator(spec)

    @classmethod
    def from_file(cls, path: Path | None = None) -> GeneratorRegistry:
        """
        Load a routing document.

        Args:
            path: YAML/JSON routing document (default: packaged registry)

        Raises:
            MissingSourceFileError: If the document does not exist
            RegistryError: If the document is not a generator list
        """
        path = path or DEFAULT_REGISTRY_PATH
        if not path.exists():
            raise MissingSourceFileError(path)

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RegistryError(f"Cannot parse routing document {path}: {e}") from e

        registry = cls.from_dict(data)
        logger.info(f"Loaded {len(registry)} generators from {path}")
        return registry

    @classmethod
    def from_dict(cls, data: Any) -> GeneratorRegistry:
        """Build a registry from a parsed routing document."""
        if not isinstance(data, dict) or not isinstance(data.get("generators"), list):
            raise RegistryError("Routing document must contain a 'generators' list")

        registry = cls()
        for index, entry in enumerate(data["generators"]):
            try:
                spec = GeneratorSpec.model_validate(entry)
            except ValidationError as e:
                logger.warning(f"Skipping invalid generator entry #{index}: {e}")
                continue
            registry.register_generator(spec)
        return registry

    def list_generators(self) -> list[GeneratorSpec]:
        """All generators in document order."""
        return list(self._generators.values())

    def get_generator(self, generator_id: str) -> GeneratorSpec | None:
        """Get a generator by id."""
        return self._generators.get(generator_id)

    def register_generator(self, spec: GeneratorSpec) -> str:
        """
        Register a generator programmatically.

        A later spec with the same id replaces the earlier one.

        Returns:
            The generator id
        """
        if spec.id in self._generators:
            logger.warning(f"Generator '{spec.id}' registered twice, keeping last")
        self._generators[spec.id] = spec
        return spec.id

    def collection_map(self) -> dict[str, Dimension]:
        """Default collections extended by every collection the generators declare."""
        collections = dict(DEFAULT_COLLECTIONS)
        for spec in self._generators.values():
            for ref in spec.collections:
                collections[ref.id] = ref.dimension
        return collections

    def __len__(self) -> int:
        return len(self._generators)

    def __iter__(self):
        return iter(self._generators.values())
