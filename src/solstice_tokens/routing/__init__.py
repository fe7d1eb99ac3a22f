"""
Token routing - which tokens go to which stylesheet.

Tokens are classified by the collections their modes come from and
matched to generators by name patterns, declared collections and a
classifier fallback.
"""

from solstice_tokens.routing.classifier import ModeClassification, ModeClassifier
from solstice_tokens.routing.registry import DEFAULT_REGISTRY_PATH, GeneratorRegistry
from solstice_tokens.routing.router import TokenRouter, glob_to_regex, matches_any

__all__ = [
    "DEFAULT_REGISTRY_PATH",
    "GeneratorRegistry",
    "ModeClassification",
    "ModeClassifier",
    "TokenRouter",
    "glob_to_regex",
    "matches_any",
]
