#!/usr/bin/env python3
"""
Example: Generating stylesheets.

Loads the sample project under examples/sample (datasets and alias
mappings in the standard raw/ layout), runs every generator from the
packaged registry and prints the CSS.

Usage:
    python examples/generate_css.py
"""

from pathlib import Path

from solstice_tokens.config import PipelineConfig
from solstice_tokens.pipeline import TokenPipeline

SAMPLE_DIR = Path(__file__).parent / "sample"


def main() -> None:
    """Generate CSS for the sample project."""
    print("Solstice Tokens CSS Generation Demo")
    print("=" * 40)
    print()

    pipeline = TokenPipeline.load(PipelineConfig.discover(SAMPLE_DIR))
    print(f"Loaded {len(pipeline.store)} tokens from {', '.join(pipeline.store.sources())}")
    print()

    for spec in pipeline.registry.list_generators():
        tokens = pipeline.generator.route(spec)
        print(f"{spec.display_name} ({spec.emission_strategy}): {len(tokens)} tokens")
    print()

    # write=False keeps everything in memory
    for result in pipeline.generate_all(write=False):
        print(f"--- {result.generator_id} ({result.declaration_count} declarations) ---")
        print(result.css)


if __name__ == "__main__":
    main()
