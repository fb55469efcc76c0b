"""FastMCP server initialization and tool registration."""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from obsidian_notes.config import configure, get_configuration
from obsidian_notes.constants import LOG_LEVEL
from obsidian_notes.data_models import NotesConfiguration

# Initialize logger (stderr, so the stdio transport stays clean)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("obsidian_notes")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators.


def run_server(configuration: Optional[NotesConfiguration] = None) -> None:
    """Start the MCP server with stdio transport.

    Args:
        configuration: Verified server configuration. When omitted it is loaded
            from the configuration file and environment.
    """
    if configuration is not None:
        configure(configuration)
    get_configuration()

    logger.info("Starting Obsidian notes MCP server on stdio")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
