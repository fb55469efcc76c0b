"""Pydantic input models for reading and writing notes.

This module defines input models for the note tools:
- Read several notes at once
- Create or overwrite a note
- Replace, append to, or prepend to a note
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .base import BaseNotePathInput, validate_path_text


class ReadNotesInput(BaseModel):
    """Input model for read_notes tool.

    Reads several notes in one call. A failure on one path is reported inline
    for that path and does not stop the others.

    Examples:
        >>> ReadNotesInput(paths=["Daily Notes/2025-10-27.md"])
        >>> ReadNotesInput(paths=["Projects/Alpha.md", "Projects/Beta.md"])
    """

    paths: list[str] = Field(
        min_length=1,
        description=(
            "Note paths relative to the vault, including the .md extension. "
            "Reading too many notes at once may exceed the client's context."
        ),
        examples=[["Daily Notes/2025-10-27.md", "Projects/Alpha.md"]]
    )

    @field_validator('paths')
    @classmethod
    def validate_paths(cls, v: list[str]) -> list[str]:
        """Validate that no requested path is blank.

        Args:
            v: The list of paths to validate

        Returns:
            The validated list, unchanged

        Raises:
            ValueError: If any path is empty or only whitespace
        """
        return [validate_path_text(path) for path in v]

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"paths": ["Daily Notes/2025-10-27.md"]},
                {"paths": ["Projects/Alpha.md", "Projects/Beta.md"]}
            ]
        }


class WriteNoteInput(BaseNotePathInput):
    """Input model for write_note tool.

    Creates a new note or completely overwrites an existing one. Parent
    folders are only created when ``createDirectories`` is set.

    Examples:
        >>> WriteNoteInput(path="Projects/New Project.md", content="# New Project")
        >>> WriteNoteInput(path="Inbox/2025/Idea.md", content="", createDirectories=True)
    """

    create_directories: bool = Field(
        False,
        alias="createDirectories",
        description="Create missing parent folders before writing. Default: False.",
    )

    class Config:
        """Pydantic model configuration."""
        populate_by_name = True
        json_schema_extra = {
            "examples": [
                {
                    "path": "Projects/New Project.md",
                    "content": "# New Project\n\nGoals:\n- Goal 1",
                    "createDirectories": False
                },
                {
                    "path": "Inbox/2025/Idea.md",
                    "content": "",
                    "createDirectories": True
                }
            ]
        }


class UpdateNoteInput(BaseNotePathInput):
    """Input model for update_note tool.

    Replaces the whole note, or appends/prepends content separated by a newline.
    Append and prepend require the note to exist.

    Examples:
        >>> UpdateNoteInput(path="Log.md", content="- 3:00 PM: Review", mode="append")
        >>> UpdateNoteInput(path="Changelog.md", content="## 2025-10-27", mode="prepend")
    """

    mode: Literal["replace", "append", "prepend"] = Field(
        "replace",
        description=(
            "'replace' overwrites the note, 'append' adds content after the existing "
            "text, 'prepend' adds it before. Default: 'replace'."
        ),
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "path": "Daily Notes/2025-10-27.md",
                    "content": "## Evening Notes\n\n- Completed project review",
                    "mode": "append"
                },
                {
                    "path": "Changelog.md",
                    "content": "## 2025-10-27\n\n- Added feature X",
                    "mode": "prepend"
                }
            ]
        }
