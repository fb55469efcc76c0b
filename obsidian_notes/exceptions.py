"""
Exceptions for confined note operations.

Every error raised by the core carries an :class:`ErrorKind` so the tool
layer (and tests) can tell denials apart without parsing messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Stable identifiers for every failure the core can report."""

    HIDDEN_PATH_DENIED = "HiddenPathDenied"
    OUTSIDE_VAULT = "OutsideVault"
    SYMLINK_ESCAPE = "SymlinkEscape"
    PARENT_OUTSIDE_VAULT = "ParentOutsideVault"
    PARENT_MISSING = "ParentMissing"
    NOT_FOUND = "NotFound"
    PERMISSION_DENIED = "PermissionDenied"
    IO_ERROR = "IOError"
    INVALID_ARGUMENT = "InvalidArgument"
    WRITE_DISABLED = "WriteDisabled"
    EXTENSION_REQUIRED = "ExtensionRequired"


class NotesError(Exception):
    """Base exception for note operations."""

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class AccessDeniedError(NotesError):
    """Raised when a path fails confinement validation."""

    def __init__(self, path: str, reason: str, message: Optional[str] = None):
        self.reason = reason
        super().__init__(message or f"Access denied - {reason}: {path}", path)


class HiddenPathDeniedError(AccessDeniedError):
    kind = ErrorKind.HIDDEN_PATH_DENIED

    def __init__(self, path: str):
        super().__init__(path, "hidden files/directories not allowed")


class OutsideVaultError(AccessDeniedError):
    kind = ErrorKind.OUTSIDE_VAULT

    def __init__(self, path: str):
        super().__init__(path, "path outside allowed directories")


class SymlinkEscapeError(AccessDeniedError):
    kind = ErrorKind.SYMLINK_ESCAPE

    def __init__(self, path: str):
        super().__init__(path, "symlink target outside allowed directories")


class ParentOutsideVaultError(AccessDeniedError):
    kind = ErrorKind.PARENT_OUTSIDE_VAULT

    def __init__(self, path: str):
        super().__init__(path, "parent directory outside allowed directories")


class ParentMissingError(AccessDeniedError):
    kind = ErrorKind.PARENT_MISSING

    def __init__(self, path: str):
        super().__init__(
            path,
            "parent directory does not exist",
            f"Parent directory does not exist: {path}",
        )


class NoteNotFoundError(NotesError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str):
        super().__init__(f"Note not found: {path}", path)


class NotePermissionError(NotesError):
    kind = ErrorKind.PERMISSION_DENIED

    def __init__(self, path: str):
        super().__init__(f"Permission denied: {path}", path)


class NoteIOError(NotesError):
    kind = ErrorKind.IO_ERROR

    def __init__(self, path: str, reason: str):
        self.reason = reason
        super().__init__(f"Could not access {path}: {reason}", path)


class InvalidArgumentError(NotesError):
    kind = ErrorKind.INVALID_ARGUMENT


class WriteDisabledError(NotesError):
    kind = ErrorKind.WRITE_DISABLED

    def __init__(self) -> None:
        super().__init__(
            "Write operations are disabled. "
            "Start the server with --enable-write to enable them."
        )


class ExtensionRequiredError(NotesError):
    kind = ErrorKind.EXTENSION_REQUIRED

    def __init__(self, path: str, extension: str = ".md"):
        super().__init__(f"Note path must end with {extension} extension: {path}", path)
