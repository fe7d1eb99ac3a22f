"""
Tests for token loading and alias lookup.

Tests cover:
- TokenStore construction from records and dataset files
- Duplicate names and missing datasets
- AliasIndex direct and derived-key lookup
"""

import json
import logging
from pathlib import Path

import pytest

from solstice_tokens.config import SourceDataset
from solstice_tokens.errors import MissingSourceFileError
from solstice_tokens.models import AliasValue
from solstice_tokens.store import AliasIndex, TokenStore, read_json


class TestTokenStore:
    """Tests for TokenStore."""

    def test_from_records_tags_source(self):
        """Records without a source get the dataset tag."""
        store = TokenStore.from_records(
            [{"name": "a", "values": {}}, {"name": "b", "source": "custom", "values": {}}],
            source="core-primitives",
        )
        assert store.get("a").source == "core-primitives"
        assert store.get("b").source == "custom"

    def test_lookup(self, store: TokenStore):
        """Tokens are addressable by name."""
        assert "spacing/4" in store
        assert store.get("spacing/4").value_for("1:0").value == 16
        assert store.get("nope") is None

    def test_load_order(self, store: TokenStore):
        """Iteration follows load order."""
        names = store.names()
        assert names[0] == "color/brand/amber-500"
        assert names[-1] == "accent/strong"
        assert [t.name for t in store] == names

    def test_sources(self, store: TokenStore):
        """Distinct sources in load order."""
        assert store.sources() == ["core-primitives", "density-system", "color-themes"]

    def test_duplicate_name_keeps_last(self, caplog):
        """A repeated name replaces the earlier token with a warning."""
        with caplog.at_level(logging.WARNING):
            store = TokenStore.from_records(
                [
                    {"name": "dup", "source": "one", "values": {"1:0": 1}},
                    {"name": "dup", "source": "two", "values": {"1:0": 2}},
                ]
            )
        assert len(store) == 1
        assert store.get("dup").source == "two"
        assert "Duplicate token name 'dup'" in caplog.text

    def test_from_datasets(self, temp_dir: Path):
        """Datasets are read from JSON files."""
        path = temp_dir / "tokens.json"
        path.write_text(json.dumps([{"name": "x", "values": {"1:0": 1}}]))

        store = TokenStore.from_datasets([SourceDataset(name="core", path=path)])
        assert store.get("x").source == "core"

    def test_missing_required_dataset(self, temp_dir: Path):
        """A missing required dataset is fatal."""
        missing = temp_dir / "missing.json"
        with pytest.raises(MissingSourceFileError) as exc:
            TokenStore.from_datasets([SourceDataset(name="core", path=missing)])
        assert exc.value.path == missing

    def test_missing_optional_dataset(self, temp_dir: Path, caplog):
        """A missing optional dataset is skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            store = TokenStore.from_datasets(
                [SourceDataset(name="extra", path=temp_dir / "extra.json", required=False)]
            )
        assert len(store) == 0
        assert "Optional dataset not found" in caplog.text


def test_read_json_missing(temp_dir: Path):
    """read_json raises for absent files."""
    with pytest.raises(MissingSourceFileError):
        read_json(temp_dir / "absent.json")


class TestAliasIndex:
    """Tests for AliasIndex."""

    def test_direct_lookup(self, alias_index: AliasIndex):
        """Full ids resolve through the direct table."""
        assert alias_index.lookup(AliasValue(id="VariableID:amberkey/1:1")) == "color/brand/amber-500"

    def test_derived_key_fallback(self, alias_index: AliasIndex):
        """Ids missing from the direct table fall back to the derived key."""
        assert alias_index.lookup(AliasValue(id="VariableID:neutralkey/9:9")) == "color/neutral/900"

    def test_direct_takes_precedence(self):
        """When both tables match, the direct id wins."""
        index = AliasIndex(
            {"VariableID:k/1:1": {"name": "direct/target"}},
            {"k": {"name": "derived/target"}},
        )
        assert index.lookup(AliasValue(id="VariableID:k/1:1")) == "direct/target"
        assert index.lookup(AliasValue(id="VariableID:k/2:2")) == "derived/target"

    def test_unknown(self, alias_index: AliasIndex):
        """Unknown references resolve to None."""
        assert alias_index.lookup(AliasValue(id="VariableID:missingkey/0:0")) is None
        assert alias_index.lookup(AliasValue(id="not-an-alias-id")) is None

    def test_bare_names_and_bad_entries(self):
        """Entries may be bare names; entries without a name are skipped."""
        index = AliasIndex({"a": "token/a", "b": {"id": "no-name"}}, {})
        assert index.direct_count == 1
        assert index.lookup(AliasValue(id="a")) == "token/a"

    def test_from_files(self, project_dir: Path):
        """Both mapping files are loaded."""
        index = AliasIndex.from_files(
            project_dir / "raw" / "direct-id-mapping.json",
            project_dir / "raw" / "key-mapping.json",
        )
        assert index.direct_count == 2
        assert index.key_count == 1

    def test_from_files_missing(self, temp_dir: Path):
        """Missing mapping files are fatal."""
        with pytest.raises(MissingSourceFileError):
            AliasIndex.from_files(temp_dir / "a.json", temp_dir / "b.json")
