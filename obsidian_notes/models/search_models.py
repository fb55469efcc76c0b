"""Pydantic input models for note search."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchNotesInput(BaseModel):
    """Input model for search_notes tool.

    Case-insensitive match on note file names across every vault. The query
    may also be a regular expression, with ``*`` acting as a wildcard.

    Examples:
        >>> SearchNotesInput(query="meeting")
        >>> SearchNotesInput(query="2025-*-01")
    """

    query: str = Field(
        description=(
            "Search string matched against note file names (case-insensitive, "
            "partial matches allowed). Can also be a regular expression; '*' "
            "matches any run of characters. An empty query lists every note."
        ),
        examples=["meeting", "2025-*-01", "^Project"]
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"query": "meeting"},
                {"query": "2025-*-01"}
            ]
        }
