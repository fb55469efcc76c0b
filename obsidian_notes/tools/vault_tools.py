"""MCP tools for vault discovery."""

from typing import Any

from obsidian_notes.server import mcp
from obsidian_notes.config import get_configuration


@mcp.tool()
async def list_allowed_directories() -> dict[str, Any]:
    """List the vault directories this server may access.

    Returns:
        {
            "vaults": [str, ...],   # Absolute vault paths
            "write_enabled": bool,  # Whether write_note/update_note are available
            "search_limit": int     # Maximum matches returned by search_notes
        }

    Examples:
        - Use when: Starting conversation, need to know where notes live
        - Use when: A write tool is missing, check write_enabled
    """
    return get_configuration().as_payload()
