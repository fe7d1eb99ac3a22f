"""
Trace tools - MCP tools for inspecting tokens and alias chains.

Tools for tracing an alias chain down to its leaf values and for
describing a single token.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from solstice_tokens.constants import ErrorMessages
from solstice_tokens.pipeline import TokenPipeline
from solstice_tokens.resolver import format_trace

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_trace_tools(mcp: ChukMCPServer, pipeline: TokenPipeline) -> dict[str, Any]:
    """
    Register token inspection tools with the MCP server.

    Args:
        mcp: The MCP server instance
        pipeline: The loaded token pipeline

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_trace_alias(token_name: str, mode: str | None = None) -> str:
        """
        Trace a token's alias chain down to its leaf values.

        Every mode of the token is traced unless a mode is given, either
        by display name ('JLL Dark', 'Mobile Small (320px)') or by raw
        mode id ('2403:1').

        Args:
            token_name: Token path, e.g. 'surface/base/default'
            mode: Optional mode name or id

        Returns:
            JSON string with the structured trace and its text rendering

        Example:
            tokens_trace_alias(token_name="surface/base/default", mode="JLL Light")
        """
        try:
            trace = pipeline.trace(token_name, mode)
            if trace.error is not None:
                return json.dumps(
                    {
                        "status": "error",
                        "error": trace.error.kind.value,
                        "message": trace.error.message,
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "trace": trace.model_dump(mode="json", exclude_none=True),
                    "text": format_trace(trace),
                    "issues": [e.message for e in trace.errors()],
                }
            )
        except Exception as e:
            logger.exception("Failed to trace alias")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_trace_alias"] = tokens_trace_alias

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_token(token_name: str) -> str:
        """
        Get details about a token.

        Returns the token's source, type, modes (with display names),
        one-level resolution of each mode and its dimension classification.

        Args:
            token_name: Token path

        Returns:
            JSON string with token details

        Example:
            tokens_describe_token(token_name="color/brand/amber-500")
        """
        try:
            token = pipeline.store.get(token_name)
            if token is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.TOKEN_NOT_FOUND.format(name=token_name),
                    }
                )

            resolver = pipeline.resolver
            classification = pipeline.classifier.classify(token)

            return json.dumps(
                {
                    "status": "success",
                    "token": {
                        "name": token.name,
                        "source": token.source,
                        "type": token.type_name,
                        "description": token.description,
                        "modes": [
                            {
                                "id": mode_id,
                                "name": resolver.mode_name(mode_id),
                                "value": resolver.resolve_one_level(value, token.name),
                            }
                            for mode_id, value in token.values.items()
                        ],
                        "dimensions": [d.value for d in classification.dimensions],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_token"] = tokens_describe_token

    return tools
