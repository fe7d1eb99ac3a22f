"""
Pipeline configuration - where the input datasets and outputs live.

Defaults follow the standard project layout under the working
directory. A `solstice.yaml` in that directory overrides them:

    datasets:
      - {name: core-primitives, path: raw/core-primitives/tokens-merged.json}
      - {name: brand-extras, path: raw/brand-extras.json, required: false}
    direct_id_mapping: raw/direct-id-mapping.json
    key_mapping: raw/key-mapping.json
    registry: config/generator-registry.yaml
    output_dir: .
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from solstice_tokens.constants import (
    CONFIG_FILENAME,
    DEFAULT_DATASETS,
    DEFAULT_DIRECT_ID_MAPPING,
    DEFAULT_KEY_MAPPING,
)
from solstice_tokens.errors import MissingSourceFileError


class SourceDataset(BaseModel):
    """One token dataset (a JSON array of token records)."""

    name: str = Field(..., description="Source tag given to tokens without one")
    path: Path
    required: bool = True

    model_config = {"frozen": True}


def _default_datasets() -> list[SourceDataset]:
    return [SourceDataset(name=name, path=Path(path)) for name, path in DEFAULT_DATASETS]


class PipelineConfig(BaseModel):
    """Input and output locations for one run."""

    base_path: Path = Field(default_factory=Path.cwd)
    datasets: list[SourceDataset] = Field(default_factory=_default_datasets)
    direct_id_mapping: Path = Path(DEFAULT_DIRECT_ID_MAPPING)
    key_mapping: Path = Path(DEFAULT_KEY_MAPPING)
    registry: Path | None = Field(None, description="Routing document (default: packaged)")
    output_dir: Path = Path(".")

    model_config = {"frozen": True}

    @classmethod
    def from_yaml(cls, path: Path, base_path: Path | None = None) -> PipelineConfig:
        """
        Load a config file.

        Args:
            path: YAML config file
            base_path: Root for relative paths (default: the file's directory)

        Raises:
            MissingSourceFileError: If the file does not exist
        """
        if not path.exists():
            raise MissingSourceFileError(path)

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        data.setdefault("base_path", base_path or path.parent)
        return cls.model_validate(data)

    @classmethod
    def discover(cls, base_path: Path | None = None) -> PipelineConfig:
        """Load `solstice.yaml` from base_path if present, else use defaults."""
        base_path = base_path or Path.cwd()
        config_file = base_path / CONFIG_FILENAME
        if config_file.exists():
            return cls.from_yaml(config_file, base_path)
        return cls(base_path=base_path)

    def resolve(self, path: Path) -> Path:
        """Make a configured path absolute against base_path."""
        return path if path.is_absolute() else self.base_path / path

    def resolved_datasets(self) -> list[SourceDataset]:
        """Datasets with absolute paths."""
        return [d.model_copy(update={"path": self.resolve(d.path)}) for d in self.datasets]

    @property
    def registry_path(self) -> Path | None:
        return self.resolve(self.registry) if self.registry is not None else None

    @property
    def output_path(self) -> Path:
        return self.resolve(self.output_dir)
