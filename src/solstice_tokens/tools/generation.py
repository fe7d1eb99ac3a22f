"""
Generation tools - MCP tools for routing and stylesheet output.

Tools for listing generators, previewing which tokens a generator
routes, and generating CSS.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from solstice_tokens.constants import ErrorMessages
from solstice_tokens.pipeline import TokenPipeline

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_generation_tools(mcp: ChukMCPServer, pipeline: TokenPipeline) -> dict[str, Any]:
    """
    Register generation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        pipeline: The loaded token pipeline

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _not_found(generator_id: str) -> str:
        return json.dumps(
            {
                "status": "error",
                "message": ErrorMessages.GENERATOR_NOT_FOUND.format(generator=generator_id),
            }
        )

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_generators() -> str:
        """
        List the configured generators.

        Returns:
            JSON string with each generator's id, strategy, target and patterns

        Example:
            tokens_list_generators()
        """
        try:
            generators = pipeline.registry.list_generators()
            return json.dumps(
                {
                    "status": "success",
                    "generators": [
                        {
                            "id": g.id,
                            "name": g.display_name,
                            "strategy": g.emission_strategy,
                            "target_file": g.target_file,
                            "patterns": g.patterns,
                            "source_filter": g.source_filter,
                            "collections": [c.id for c in g.collections],
                        }
                        for g in generators
                    ],
                    "count": len(generators),
                }
            )
        except Exception as e:
            logger.exception("Failed to list generators")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_generators"] = tokens_list_generators

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_route_generator(generator_id: str) -> str:
        """
        Show which tokens a generator would emit, in output order.

        Args:
            generator_id: Generator id (e.g. 'themes')

        Returns:
            JSON string with the routed token names

        Example:
            tokens_route_generator(generator_id="density")
        """
        try:
            spec = pipeline.registry.get_generator(generator_id)
            if spec is None:
                return _not_found(generator_id)

            tokens = pipeline.generator.route(spec)
            return json.dumps(
                {
                    "status": "success",
                    "generator": spec.id,
                    "tokens": [t.name for t in tokens],
                    "count": len(tokens),
                }
            )
        except Exception as e:
            logger.exception("Failed to route generator")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_route_generator"] = tokens_route_generator

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_generate_css(generator_id: str | None = None, write: bool = True) -> str:
        """
        Generate stylesheets.

        Runs one generator, or all of them when no id is given. Failing
        generators are skipped and reported.

        Args:
            generator_id: Optional generator id
            write: Write files to the output directory (default True);
                when False the CSS is returned inline

        Returns:
            JSON string with one entry per generated stylesheet

        Example:
            tokens_generate_css(generator_id="themes", write=False)
        """
        try:
            if generator_id is not None:
                spec = pipeline.registry.get_generator(generator_id)
                if spec is None:
                    return _not_found(generator_id)
                specs = [spec]
            else:
                specs = pipeline.registry.list_generators()

            output_dir = pipeline.config.output_path if write else None
            results = pipeline.generator.generate_all(specs, output_dir)
            generated = {r.generator_id for r in results}

            return json.dumps(
                {
                    "status": "success",
                    "stylesheets": [
                        {
                            "generator": r.generator_id,
                            "tokens": r.token_count,
                            "declarations": r.declaration_count,
                            **({"path": str(r.target_path)} if r.written else {"css": r.css}),
                        }
                        for r in results
                    ],
                    "skipped": [s.id for s in specs if s.id not in generated],
                }
            )
        except Exception as e:
            logger.exception("Failed to generate CSS")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_generate_css"] = tokens_generate_css

    return tools
