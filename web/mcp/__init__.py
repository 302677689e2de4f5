"""Tool-call protocol adapter for external agents."""

from web.mcp.tools import TOOL_DEFINITIONS, ContextTools

__all__ = [
    "ContextTools",
    "TOOL_DEFINITIONS",
]
