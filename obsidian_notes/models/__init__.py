"""Pydantic input models for MCP tool validation.

This package defines Pydantic models that provide automatic input validation
for all MCP tools. Each model represents the input schema for one tool, with
field-level validation, type checking, and descriptive error messages.

Architecture:
- base: BaseNotePathInput shared by the write tools
- note_models: Input models for reading and writing notes
- search_models: Input model for note search

Usage:
    from obsidian_notes.models import ReadNotesInput, WriteNoteInput
    from obsidian_notes.models import SearchNotesInput
"""

from .base import BaseNotePathInput
from .note_models import (
    ReadNotesInput,
    WriteNoteInput,
    UpdateNoteInput,
)
from .search_models import SearchNotesInput

__all__ = [
    # Base models
    "BaseNotePathInput",
    # Note models
    "ReadNotesInput",
    "WriteNoteInput",
    "UpdateNoteInput",
    # Search models
    "SearchNotesInput",
]
