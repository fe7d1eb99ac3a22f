"""
Tests for the MCP server startup.

Importing the server module loads the token inputs, so each test drops
any cached copy first.
"""

import importlib
import logging
import sys
from pathlib import Path

import pytest

from solstice_tokens.constants import CONFIG_ENV_VAR
from solstice_tokens.server import main

SERVER_MODULE = "solstice_tokens.async_server"


@pytest.fixture
def fresh_server(monkeypatch):
    """Forget any loaded server module and config override."""
    monkeypatch.delitem(sys.modules, SERVER_MODULE, raising=False)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestServerStartup:
    """Tests for loading inputs at server startup."""

    def test_loads_project(self, project_dir: Path, monkeypatch, fresh_server):
        """Tools are registered over the pipeline from the working directory."""
        monkeypatch.chdir(project_dir)
        server = importlib.import_module(SERVER_MODULE)

        assert len(server.pipeline.store) == 12
        assert len(server.pipeline.registry) == 4
        assert callable(server.tokens_trace_alias)
        assert callable(server.tokens_generate_css)

    def test_missing_dataset_exits_1(self, temp_dir: Path, monkeypatch, fresh_server, caplog):
        """A missing dataset stops startup cleanly with status 1."""
        monkeypatch.chdir(temp_dir)
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc:
            importlib.import_module(SERVER_MODULE)

        assert exc.value.code == 1
        assert "Required source file not found" in caplog.text

    def test_missing_config_exits_1(self, temp_dir: Path, monkeypatch, fresh_server, caplog):
        """--config naming a missing file exits with status 1 before serving."""
        # Registered so the override main() writes is undone afterwards
        monkeypatch.setenv(CONFIG_ENV_VAR, "")
        with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as exc:
            main(["--config", str(temp_dir / "absent.yaml")])

        assert exc.value.code == 1
        assert "absent.yaml" in caplog.text
