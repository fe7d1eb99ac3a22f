"""
Token store - loads token datasets into one name-addressable collection.

Datasets are JSON arrays of token records, one array per upstream source
(core primitives, density system, color themes). All datasets are read
fully before any resolution begins; the store is not mutated afterwards.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

from solstice_tokens.errors import MissingSourceFileError
from solstice_tokens.models.token import Token

if TYPE_CHECKING:
    from solstice_tokens.config import SourceDataset

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any:
    """Read a JSON document, raising MissingSourceFileError if absent."""
    if not path.exists():
        raise MissingSourceFileError(path)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class TokenStore:
    """
    Immutable collection of tokens keyed by name.

    Iteration follows load order, which keeps generated output
    deterministic for identical inputs.
    """

    def __init__(self, tokens: Iterable[Token] = ()):
        """
        Initialize the store.

        Args:
            tokens: Tokens in load order. A later token with the same name
                replaces an earlier one and a warning is logged.
        """
        self._tokens: dict[str, Token] = {}
        for token in tokens:
            if token.name in self._tokens:
                logger.warning(
                    f"Duplicate token name '{token.name}' "
                    f"({self._tokens[token.name].source} -> {token.source}), keeping last"
                )
            self._tokens[token.name] = token

    @classmethod
    def from_records(
        cls,
        records: Iterable[dict[str, Any]],
        source: str | None = None,
    ) -> TokenStore:
        """
        Build a store from raw token records.

        Args:
            records: Upstream token dicts
            source: Source tag for records that carry none
        """
        return cls(_parse_records(records, source))

    @classmethod
    def from_datasets(cls, datasets: Iterable[SourceDataset]) -> TokenStore:
        """
        Load every dataset from disk.

        Args:
            datasets: Configured datasets in load order

        Raises:
            MissingSourceFileError: If a required dataset is missing
        """
        tokens: list[Token] = []
        for dataset in datasets:
            if not dataset.path.exists():
                if dataset.required:
                    raise MissingSourceFileError(dataset.path)
                logger.warning(f"Optional dataset not found, skipping: {dataset.path}")
                continue

            records = read_json(dataset.path)
            loaded = _parse_records(records, dataset.name)
            logger.info(f"Loaded {len(loaded)} tokens from {dataset.path}")
            tokens.extend(loaded)

        return cls(tokens)

    def get(self, name: str) -> Token | None:
        """Get a token by name."""
        return self._tokens.get(name)

    def names(self) -> list[str]:
        """All token names in load order."""
        return list(self._tokens)

    def tokens(self) -> list[Token]:
        """All tokens in load order."""
        return list(self._tokens.values())

    def sources(self) -> list[str]:
        """Distinct source tags in load order."""
        return list(dict.fromkeys(t.source for t in self._tokens.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens.values())

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStore({len(self._tokens)} tokens)"


def _parse_records(records: Iterable[dict[str, Any]], source: str | None) -> list[Token]:
    tokens = []
    for record in records:
        if source and not record.get("source"):
            record = {**record, "source": source}
        tokens.append(Token.model_validate(record))
    return tokens
