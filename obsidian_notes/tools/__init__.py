"""MCP tool definitions for Obsidian note operations.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from obsidian_notes.tools import vault_tools
from obsidian_notes.tools import note_tools
from obsidian_notes.tools import search_tools

__all__ = [
    "vault_tools",
    "note_tools",
    "search_tools",
]
