"""Core business logic for reading and writing notes inside the vaults."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

from obsidian_notes.constants import NOTE_EXTENSION
from obsidian_notes.core.vault_operations import locate_note
from obsidian_notes.data_models import NoteReadResult, NotesConfiguration
from obsidian_notes.exceptions import (
    ExtensionRequiredError,
    InvalidArgumentError,
    NoteIOError,
    NoteNotFoundError,
    NotePermissionError,
    NotesError,
    WriteDisabledError,
)

logger = logging.getLogger(__name__)


class UpdateMode(str, Enum):
    """How ``update_note`` combines new content with the existing note."""

    REPLACE = "replace"
    APPEND = "append"
    PREPEND = "prepend"


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _translate_os_error(path: str, exc: OSError) -> NotesError:
    """Map a low-level I/O failure onto the note error taxonomy."""
    if isinstance(exc, FileNotFoundError):
        return NoteNotFoundError(path)
    if isinstance(exc, PermissionError):
        return NotePermissionError(path)
    if isinstance(exc, IsADirectoryError):
        return NoteIOError(path, "is a directory")
    return NoteIOError(path, exc.strerror or str(exc))


def _read_text(path: Path, display: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise NoteIOError(display, "not valid UTF-8 text") from exc
    except OSError as exc:
        raise _translate_os_error(display, exc) from exc


def _write_text(path: Path, display: str, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise _translate_os_error(display, exc) from exc


def _make_directories(directory: Path, display: str) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise _translate_os_error(display, exc) from exc


def _ensure_write_enabled(config: NotesConfiguration) -> None:
    if not config.enable_write:
        raise WriteDisabledError()


def _ensure_note_extension(note_path: str) -> None:
    if not note_path.endswith(NOTE_EXTENSION):
        raise ExtensionRequiredError(note_path, NOTE_EXTENSION)


def _coerce_mode(mode: UpdateMode | str) -> UpdateMode:
    try:
        return UpdateMode(mode)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in UpdateMode)
        raise InvalidArgumentError(
            f"Invalid update mode '{mode}'. Expected one of: {allowed}"
        ) from exc


def combine_content(existing: str, content: str, mode: UpdateMode) -> str:
    """Assemble the final note body for an update.

    Examples:
        >>> combine_content("line1", "line2", UpdateMode.APPEND)
        'line1\\nline2'
        >>> combine_content("line1", "line2", UpdateMode.PREPEND)
        'line2\\nline1'
    """
    if mode is UpdateMode.APPEND:
        return f"{existing}\n{content}"
    if mode is UpdateMode.PREPEND:
        return f"{content}\n{existing}"
    return content


# ==============================================================================
# NOTE OPERATIONS
# ==============================================================================


async def read_note(note_path: str, config: NotesConfiguration) -> str:
    """Read a single note after confining it to the vaults.

    Raises:
        AccessDeniedError: If the path fails validation.
        NoteNotFoundError: If the note does not exist.
        NotePermissionError: If the note cannot be read.
        NoteIOError: For any other read failure.
    """
    valid_path = await locate_note(note_path, config)
    return await asyncio.to_thread(_read_text, valid_path, note_path)


async def read_notes(
    note_paths: Sequence[str],
    config: NotesConfiguration,
) -> list[NoteReadResult]:
    """Read several notes at once; a failure only affects its own slot.

    Args:
        note_paths: Note paths relative to whichever vault holds them (absolute
            paths inside any vault are accepted too).
        config: Server configuration.

    Returns:
        One :class:`NoteReadResult` per requested path, in request order. Denied
        or unreadable paths carry an ``error`` message instead of ``content``.
    """

    async def _read_one(note_path: str) -> NoteReadResult:
        try:
            content = await read_note(note_path, config)
        except NotesError as exc:
            logger.debug("Could not read '%s': %s", note_path, exc)
            return NoteReadResult(path=note_path, error=str(exc))
        return NoteReadResult(path=note_path, content=content)

    return list(await asyncio.gather(*(_read_one(path) for path in note_paths)))


async def write_note(
    note_path: str,
    content: str,
    config: NotesConfiguration,
    create_directories: bool = False,
) -> dict[str, Any]:
    """Create a note or overwrite an existing one unconditionally.

    Args:
        note_path: Target note path ending in ``.md``.
        content: Full note body.
        config: Server configuration.
        create_directories: Create missing parent folders before writing.

    Returns:
        ``{"path": note_path, "status": "written"}``

    Raises:
        WriteDisabledError: Writing is disabled (checked before anything else).
        ExtensionRequiredError: ``note_path`` does not end in ``.md``.
        AccessDeniedError: The path fails validation.
        NotesError: The write itself fails.
    """
    _ensure_write_enabled(config)
    _ensure_note_extension(note_path)

    valid_path = await locate_note(note_path, config, create_parents=create_directories)

    if create_directories:
        await asyncio.to_thread(_make_directories, valid_path.parent, note_path)

    await asyncio.to_thread(_write_text, valid_path, note_path, content)
    logger.info("Wrote note '%s'", note_path)
    return {"path": note_path, "status": "written"}


async def update_note(
    note_path: str,
    content: str,
    config: NotesConfiguration,
    mode: UpdateMode | str = UpdateMode.REPLACE,
) -> dict[str, Any]:
    """Replace, append to, or prepend to a note.

    ``append`` writes ``existing + "\\n" + content`` and ``prepend`` writes
    ``content + "\\n" + existing``; both need the note to exist already.
    ``replace`` writes ``content`` verbatim and creates the note if needed.
    Concurrent updates of the same note are not serialized.

    Returns:
        ``{"path": note_path, "status": "replaced" | "appended" | "prepended"}``

    Raises:
        WriteDisabledError: Writing is disabled (checked before anything else).
        InvalidArgumentError: ``mode`` is not a known update mode.
        ExtensionRequiredError: ``note_path`` does not end in ``.md``.
        AccessDeniedError: The path fails validation.
        NoteNotFoundError: ``append``/``prepend`` on a note that does not exist.
    """
    _ensure_write_enabled(config)
    update_mode = _coerce_mode(mode)
    _ensure_note_extension(note_path)

    valid_path = await locate_note(note_path, config)

    existing = ""
    if update_mode is not UpdateMode.REPLACE:
        existing = await asyncio.to_thread(_read_text, valid_path, note_path)

    final_content = combine_content(existing, content, update_mode)
    await asyncio.to_thread(_write_text, valid_path, note_path, final_content)

    status = {
        UpdateMode.REPLACE: "replaced",
        UpdateMode.APPEND: "appended",
        UpdateMode.PREPEND: "prepended",
    }[update_mode]
    logger.info("Updated note '%s' (%s)", note_path, update_mode.value)
    return {"path": note_path, "status": status}
