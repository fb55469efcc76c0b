"""Base Pydantic models for MCP tool input validation.

These models only check the *shape* of tool arguments. Path confinement,
the ``.md`` requirement and write gating are enforced by the core so they
apply in the same order no matter how an operation is invoked.

Base Models:
- BaseNotePathInput: A single note path plus note content
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def validate_path_text(v: str) -> str:
    """Reject blank paths while leaving the path itself untouched.

    Args:
        v: The path to validate

    Returns:
        The path exactly as supplied

    Raises:
        ValueError: If the path is empty or only whitespace
    """
    if not v.strip():
        raise ValueError(
            "Note path cannot be empty. "
            "Provide a path relative to the vault, like 'Daily Notes/2025-10-27.md'."
        )
    return v


class BaseNotePathInput(BaseModel):
    """Base model for operations that target exactly one note.

    Provides the ``path`` and ``content`` fields shared by the write tools.
    """

    path: str = Field(
        min_length=1,
        description=(
            "Note path relative to the vault, including the .md extension. "
            "Examples: 'Daily Notes/2025-10-27.md', 'Projects/New Project.md'. "
            "Forward slashes for folders."
        ),
        examples=["Daily Notes/2025-10-27.md", "Projects/New Project.md", "README.md"]
    )

    content: str = Field(
        description="Markdown content to write. Can be an empty string."
    )

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate that the note path is not blank."""
        return validate_path_text(v)
