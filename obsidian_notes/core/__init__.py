"""Core note, search and confinement logic, independent of the MCP adapter."""
