"""
Alias index - lookup tables from alias references to token names.

Two tables are built once from the auxiliary mapping files:
- direct: full reference id -> token name
- derived key: key fragment embedded in the id -> token name

Direct lookup always wins; the derived key is the fallback.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from solstice_tokens.models.token import AliasValue
from solstice_tokens.store.loader import read_json

logger = logging.getLogger(__name__)


def _entry_name(entry: Any) -> str | None:
    """Mapping entries are token records or bare token names."""
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        name = entry.get("name")
        return name if isinstance(name, str) else None
    return None


def _name_table(mapping: Mapping[str, Any]) -> dict[str, str]:
    table: dict[str, str] = {}
    for ref, entry in mapping.items():
        name = _entry_name(entry)
        if name is None:
            logger.debug(f"Skipping mapping entry without a token name: {ref}")
            continue
        table[ref] = name
    return table


class AliasIndex:
    """Resolves alias references to token names."""

    def __init__(
        self,
        direct_by_id: Mapping[str, Any] | None = None,
        by_derived_key: Mapping[str, Any] | None = None,
    ):
        """
        Initialize the index.

        Args:
            direct_by_id: Reference id -> token record or name
            by_derived_key: Derived key -> token record or name
        """
        self._direct = _name_table(direct_by_id or {})
        self._by_key = _name_table(by_derived_key or {})

    @classmethod
    def from_files(cls, direct_id_path: Path, key_path: Path) -> AliasIndex:
        """
        Load both mapping files.

        Raises:
            MissingSourceFileError: If either file is missing
        """
        index = cls(read_json(direct_id_path), read_json(key_path))
        logger.info(
            f"Loaded alias index: {index.direct_count} direct ids, {index.key_count} keys"
        )
        return index

    def lookup(self, alias: AliasValue) -> str | None:
        """
        Resolve an alias to a token name.

        Args:
            alias: The alias value

        Returns:
            Target token name, or None if neither table knows the reference
        """
        name = self._direct.get(alias.id)
        if name is not None:
            return name

        key = alias.key
        if key is not None:
            return self._by_key.get(key)
        return None

    @property
    def direct_count(self) -> int:
        return len(self._direct)

    @property
    def key_count(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return f"AliasIndex({self.direct_count} ids, {self.key_count} keys)"
