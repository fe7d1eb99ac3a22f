"""
MCP tool implementations.

Tools are organized by domain:
- trace - Alias chain tracing and token inspection
- generation - Routing preview and stylesheet generation
"""

from solstice_tokens.tools.generation import register_generation_tools
from solstice_tokens.tools.trace import register_trace_tools

__all__ = [
    "register_generation_tools",
    "register_trace_tools",
]
