"""
Token storage - the in-memory graph every other component reads.

The store and alias index are populated once, before any resolution,
and treated as immutable for the rest of the run.
"""

from solstice_tokens.store.aliases import AliasIndex
from solstice_tokens.store.loader import TokenStore, read_json

__all__ = [
    "AliasIndex",
    "TokenStore",
    "read_json",
]
