#!/usr/bin/env python3
"""
Async Solstice Tokens MCP Server using chuk-mcp-server

This server exposes the design token pipeline over MCP. Token datasets,
alias mappings and the generator registry are loaded once at startup
from the working directory, from `solstice.yaml` there, or from the
config file named by the SOLSTICE_CONFIG environment variable.

The server provides tools for:
- Tracing alias chains down to leaf values, per mode
- Inspecting individual tokens and their dimension classification
- Previewing how tokens are routed to generators
- Generating CSS custom property stylesheets
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from solstice_tokens.config import PipelineConfig
from solstice_tokens.constants import CONFIG_ENV_VAR
from solstice_tokens.errors import MissingSourceFileError
from solstice_tokens.pipeline import TokenPipeline
from solstice_tokens.tools import register_generation_tools, register_trace_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("solstice-tokens")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CONFIG_PATH = os.environ.get(CONFIG_ENV_VAR)


def load_pipeline() -> TokenPipeline:
    """Load all inputs, exiting with status 1 if a required file is missing."""
    try:
        if CONFIG_PATH:
            config = PipelineConfig.from_yaml(Path(CONFIG_PATH))
        else:
            config = PipelineConfig.discover(BASE_PATH)
        return TokenPipeline.load(config)
    except MissingSourceFileError as e:
        logger.error(f"Cannot start Solstice Tokens MCP Server: {e}")
        raise SystemExit(1) from e


pipeline = load_pipeline()

# Register all tools
trace_tools = register_trace_tools(mcp, pipeline)
generation_tools = register_generation_tools(mcp, pipeline)

# Export tool functions for direct access
tokens_trace_alias = trace_tools["tokens_trace_alias"]
tokens_describe_token = trace_tools["tokens_describe_token"]

tokens_list_generators = generation_tools["tokens_list_generators"]
tokens_route_generator = generation_tools["tokens_route_generator"]
tokens_generate_css = generation_tools["tokens_generate_css"]

logger.info("Solstice Tokens MCP Server initialized")
logger.info(f"  Base path: {pipeline.config.base_path}")
logger.info(f"  Tokens loaded: {len(pipeline.store)}")
logger.info(f"  Generators: {', '.join(g.id for g in pipeline.registry)}")
logger.info(f"  Output dir: {pipeline.config.output_path}")
