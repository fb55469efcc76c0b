"""Search tools for Obsidian notes.

This module contains the MCP tool wrapper for note search:
- search_notes: Find notes by file name across every vault
"""
from __future__ import annotations

import logging
from typing import Any

from obsidian_notes.server import mcp
from obsidian_notes.config import get_configuration
from obsidian_notes.models import SearchNotesInput
from obsidian_notes.core.search_operations import search_notes as search_notes_core

logger = logging.getLogger(__name__)


@mcp.tool()
async def search_notes(input: SearchNotesInput) -> dict[str, Any]:
    """Search for notes by name across all vaults.

    The search is case-insensitive and matches partial names. Queries can
    also be a valid regex ('*' matches anything). Hidden files and folders
    are never searched. Returns paths of the notes that match the query.

    Args:
        input (SearchNotesInput): Validated input containing:
            - query (str): Search string or pattern
                Examples: "meeting", "2025-*-01", "^Project"

    Returns:
        {
            "query": str,
            "matches": [str, ...],  # Paths relative to their vault (max 200)
            "total": int,           # Total number of matches found
            "truncated": bool,      # True when matches were cut off
            "omitted": int          # Matches not shown
        }

    Examples:
        - Use when: Looking for a note by (part of) its name
        - Workflow: search_notes() → read_notes()
        - Don't use: Searching note contents (not supported)
    """
    result = await search_notes_core(input.query, get_configuration())
    if result.truncated:
        logger.info(
            "Search for '%s' returned %d of %d matches",
            input.query,
            len(result.matches),
            result.total,
        )
    return {"query": input.query, **result.as_payload()}
