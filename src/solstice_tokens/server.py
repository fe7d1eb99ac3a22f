#!/usr/bin/env python3
"""
Entry point for the Solstice Tokens MCP Server.

    solstice-tokens-mcp                          # stdio, ./solstice.yaml or defaults
    solstice-tokens-mcp --config tokens.yaml --transport http --port 8080

Token inputs are loaded before the transport starts; a missing dataset
or mapping file exits with status 1.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from solstice_tokens.constants import CONFIG_ENV_VAR

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solstice-tokens-mcp",
        description="Solstice Tokens MCP Server - alias tracing and CSS generation",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Pipeline config file (default: ${CONFIG_ENV_VAR}, else ./solstice.yaml if present)",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Load the token pipeline and serve it over the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.config is not None:
        os.environ[CONFIG_ENV_VAR] = str(args.config.resolve())

    # Importing the server module loads the inputs and registers the tools
    from solstice_tokens.async_server import mcp, pipeline

    logger.info(f"Serving {len(pipeline.store)} tokens from {', '.join(pipeline.store.sources())}")
    if args.transport == "stdio":
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Listening on http://localhost:{args.port}")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
