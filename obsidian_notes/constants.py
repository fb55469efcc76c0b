"""Module-level constants for the Obsidian notes MCP server."""

from pathlib import Path

# Configuration
CONFIG_PATH = Path(__file__).parent.parent / "vaults.yaml"
CONFIG_PATH_ENV = "OBSIDIAN_NOTES_CONFIG"
VAULTS_ENV = "OBSIDIAN_NOTES_VAULTS"
ENABLE_WRITE_ENV = "OBSIDIAN_NOTES_ENABLE_WRITE"

# Notes
NOTE_EXTENSION = ".md"

# Limits
SEARCH_LIMIT = 200

# Logging
LOG_LEVEL = "INFO"
