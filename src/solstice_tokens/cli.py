#!/usr/bin/env python3
"""
Command line entry point for the token pipeline.

    solstice-tokens trace surface/base/default "JLL Light"
    solstice-tokens generate --generator themes --dry-run
"""

import argparse
import logging
import sys
from pathlib import Path

from solstice_tokens.config import PipelineConfig
from solstice_tokens.constants import ErrorMessages
from solstice_tokens.errors import MissingSourceFileError
from solstice_tokens.pipeline import TokenPipeline
from solstice_tokens.resolver import format_trace

RULE = "─" * 60


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solstice-tokens",
        description="Trace design token aliases and generate CSS custom properties",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Pipeline config file (default: ./solstice.yaml if present)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    trace = commands.add_parser("trace", help="Trace a token's alias chain")
    trace.add_argument("token", help="Token name, e.g. surface/base/default")
    trace.add_argument(
        "mode",
        nargs="?",
        default=None,
        help="Mode name ('JLL Light', 'Mobile Small (320px)') or id ('2403:0')",
    )

    generate = commands.add_parser("generate", help="Generate CSS stylesheets")
    generate.add_argument("--generator", default=None, help="Only run this generator")
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the CSS instead of writing files",
    )

    return parser


def load_config(path: Path | None) -> PipelineConfig:
    if path is not None:
        return PipelineConfig.from_yaml(path)
    return PipelineConfig.discover()


def run_trace(pipeline: TokenPipeline, token: str, mode: str | None) -> int:
    print(f"\n🔍 Tracing alias for: {token}")
    if mode:
        print(f"🎯 Mode: {mode}")
    print(RULE)

    trace = pipeline.trace(token, mode)
    print(format_trace(trace))
    return 1 if trace.error is not None else 0


def run_generate(pipeline: TokenPipeline, generator_id: str | None, dry_run: bool) -> int:
    if generator_id is not None:
        spec = pipeline.registry.get_generator(generator_id)
        if spec is None:
            print(ErrorMessages.GENERATOR_NOT_FOUND.format(generator=generator_id), file=sys.stderr)
            return 1
        specs = [spec]
    else:
        specs = pipeline.registry.list_generators()

    output_dir = None if dry_run else pipeline.config.output_path
    results = pipeline.generator.generate_all(specs, output_dir)

    for result in results:
        if result.written:
            print(f"✅ {result.generator_id}: {result.declaration_count} declarations -> {result.target_path}")
        else:
            print(result.css)

    return 0 if len(results) == len(specs) else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        pipeline = TokenPipeline.load(load_config(args.config))
    except MissingSourceFileError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.command == "trace":
        return run_trace(pipeline, args.token, args.mode)
    return run_generate(pipeline, args.generator, args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
