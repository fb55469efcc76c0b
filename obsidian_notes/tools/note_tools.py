"""Note reading and writing MCP tools.

This module provides MCP tool wrappers for the note operations:
- Read several notes at once
- Create or overwrite a note
- Replace, append to, or prepend to a note

All three tools are always registered. When writing is disabled the core
rejects write_note and update_note with a message telling the client how to
enable them.

All tools delegate to core operations in obsidian_notes.core.note_operations.
"""
from __future__ import annotations

from typing import Any

from obsidian_notes.server import mcp
from obsidian_notes.config import get_configuration
from obsidian_notes.models import ReadNotesInput, UpdateNoteInput, WriteNoteInput
from obsidian_notes.core import note_operations


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

# Failed reads are reported inline per path; the call itself succeeds.
@mcp.tool()
async def read_notes(input: ReadNotesInput) -> dict[str, Any]:
    """Read the contents of multiple notes.

    Each note's content is returned with its path as a reference. Failed
    reads for individual notes won't stop the entire operation. Reading too
    many at once may result in an error.

    Args:
        input (ReadNotesInput): Validated input containing:
            - paths (list[str]): Note paths relative to the vault
                Examples: ["Daily Notes/2025-10-27.md", "Projects/Alpha.md"]

    Returns:
        {
            "notes": [
                {"path": str, "content": str}  # on success
                {"path": str, "error": str}    # on failure
            ],
            "read": int,    # Notes read successfully
            "failed": int   # Notes that could not be read
        }

    Error Handling:
        - ValidationError: Empty path list or blank path
        - Hidden path, path outside the vault, missing note → inline "error"
    """
    results = await note_operations.read_notes(input.paths, get_configuration())
    read = sum(1 for result in results if result.ok)
    return {
        "notes": [result.as_payload() for result in results],
        "read": read,
        "failed": len(results) - read,
    }


# ==============================================================================
# WRITE OPERATIONS
# ==============================================================================

@mcp.tool()
async def write_note(input: WriteNoteInput) -> dict[str, Any]:
    """Create a new note or completely overwrite an existing note.

    Can optionally create parent directories if they don't exist. Path must
    end in .md extension.

    Args:
        input (WriteNoteInput): Validated input containing:
            - path (str): Note path ending in .md
            - content (str): Full markdown content
            - createDirectories (bool): Create missing parent folders (default False)

    Returns:
        {"path": str, "status": "written"}

    Error Handling:
        - Writing disabled → Error asking to restart with --enable-write
        - Path without .md → Error, nothing is written
        - Hidden path or path outside the vault → Access denied error
        - Missing parent folder → Error, retry with createDirectories=true
    """
    return await note_operations.write_note(
        input.path,
        input.content,
        get_configuration(),
        create_directories=input.create_directories,
    )


@mcp.tool()
async def update_note(input: UpdateNoteInput) -> dict[str, Any]:
    """Update an existing note.

    Can replace the entire content, append to the end, or prepend to the
    beginning. Appended and prepended content is separated from the existing
    text by a newline. Path must end in .md extension.

    Args:
        input (UpdateNoteInput): Validated input containing:
            - path (str): Note path ending in .md
            - content (str): Markdown content
            - mode (str): "replace" (default), "append" or "prepend"

    Returns:
        {"path": str, "status": "replaced" | "appended" | "prepended"}

    Error Handling:
        - Writing disabled → Error asking to restart with --enable-write
        - Path without .md → Error, nothing is written
        - append/prepend on a missing note → Note not found error
    """
    return await note_operations.update_note(
        input.path,
        input.content,
        get_configuration(),
        mode=input.mode,
    )
