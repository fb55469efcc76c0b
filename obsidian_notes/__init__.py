"""Obsidian Notes MCP Server

Confined note reading, searching and writing over one or more vaults via
Model Context Protocol.
"""

from obsidian_notes.config import configure, get_configuration, load_configuration
from obsidian_notes.data_models import NotesConfiguration, NoteReadResult, SearchResult
from obsidian_notes.server import mcp, run_server

# Import tools to register them with the MCP server
from obsidian_notes import tools  # noqa: F401

__version__ = "1.0.0"
__all__ = [
    "configure",
    "get_configuration",
    "load_configuration",
    "NotesConfiguration",
    "NoteReadResult",
    "SearchResult",
    "mcp",
    "run_server",
]
