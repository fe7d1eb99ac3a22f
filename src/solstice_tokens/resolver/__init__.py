"""
Alias resolution - follows token references through the graph.

The resolver turns alias values into either a one-hop var() reference
or a fully traced leaf value, and renders traces for inspection.
"""

from solstice_tokens.resolver.alias import AliasResolver
from solstice_tokens.resolver.trace_format import format_trace

__all__ = [
    "AliasResolver",
    "format_trace",
]
