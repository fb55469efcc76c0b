"""Path normalization and vault confinement checks.

Every filesystem location the server touches passes through
:func:`validate_path` first. Normalization is a pure string transform used for
prefix comparison only; the validator is the one that resolves symlinks and
parent directories.
"""

from __future__ import annotations

import asyncio
import errno
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from obsidian_notes.exceptions import (
    HiddenPathDeniedError,
    InvalidArgumentError,
    NoteIOError,
    OutsideVaultError,
    ParentMissingError,
    ParentOutsideVaultError,
    SymlinkEscapeError,
)

if TYPE_CHECKING:
    from obsidian_notes.data_models import NotesConfiguration


_SEPARATORS = re.compile(r"[\\/]" if os.sep == "\\" else r"/")


# ==============================================================================
# NORMALIZATION
# ==============================================================================


def normalize_path(path: str) -> str:
    """Return the case-folded, platform-canonical form of ``path``.

    The result is only meant for comparing paths against the configured
    vaults. It never touches the filesystem, so symlinks are not followed.

    Examples:
        >>> normalize_path("/Vault/Notes/../Daily.md")
        '/vault/daily.md'
    """
    return os.path.normcase(os.path.normpath(path)).casefold()


def expand_home(path: str) -> str:
    """Expand a leading ``~`` or ``~/`` to the invoking user's home directory."""
    if path == "~" or path.startswith("~/") or (os.sep != "/" and path.startswith("~" + os.sep)):
        return str(Path.home()) + path[1:]
    return path


def is_within_roots(normalized: str, normalized_roots: Iterable[str]) -> bool:
    """Check whether a normalized path equals or lies below a normalized root."""
    for root in normalized_roots:
        if normalized == root:
            return True
        prefix = root if root.endswith(os.sep) else root + os.sep
        if normalized.startswith(prefix):
            return True
    return False


def path_segments(path: str) -> list[str]:
    """Split a path string on every separator, dropping empty segments."""
    return [part for part in _SEPARATORS.split(path) if part]


def _client_segments(candidate: str, config: NotesConfiguration) -> list[str]:
    """Return the segments of ``candidate`` below the vault it names, if any.

    A candidate spelled as ``<vault>/sub/note.md`` only contributes ``sub`` and
    ``note.md``; the vault's own segments are configuration, not client input.

    This deliberately narrows the hidden-path rule: a vault configured below a
    dotted directory (``/home/me/.notes``) is reachable through absolute paths,
    while the unexpanded ``~/.notes/x.md`` form and any dotted segment below
    the vault are still denied.
    """
    segments = path_segments(candidate)
    if not os.path.isabs(candidate):
        return segments

    folded = [normalize_path(part) for part in segments]
    for root in config.roots:
        root_segments = [normalize_path(part) for part in path_segments(str(root))]
        if folded[: len(root_segments)] == root_segments:
            return segments[len(root_segments):]
    return segments


def _is_hidden(segment: str) -> bool:
    return segment.startswith(".")


# ==============================================================================
# VALIDATION
# ==============================================================================


def _resolve_existing(absolute: str) -> Path | None:
    try:
        return Path(absolute).resolve(strict=True)
    except (OSError, RuntimeError, ValueError):
        return None


def _reject_nul(candidate: str) -> None:
    if "\x00" in candidate:
        raise InvalidArgumentError(
            f"Path contains a NUL byte: {candidate!r}", candidate
        )


def _dangling_link_target(link: Path) -> Path:
    try:
        os.stat(link)
    except OSError as exc:
        if exc.errno == errno.ELOOP:
            raise NoteIOError(str(link), "symlink loop") from exc
    try:
        return link.resolve(strict=False)
    except (OSError, RuntimeError) as exc:
        raise NoteIOError(str(link), "symlink cannot be resolved") from exc


def _nearest_existing_ancestor(path: Path) -> Path | None:
    for ancestor in path.parents:
        resolved = _resolve_existing(str(ancestor))
        if resolved is not None:
            return resolved
    return None


def validate_path_sync(
    candidate: str,
    config: NotesConfiguration,
    *,
    create_parents: bool = False,
) -> Path:
    """Confine ``candidate`` to the configured vaults.

    Args:
        candidate: Client supplied path, relative (to the working directory) or
            absolute. ``~`` is expanded.
        config: Server configuration holding the vault roots.
        create_parents: Accept a missing parent directory as long as the nearest
            existing ancestor lies inside a vault. Used when the caller is about
            to create the directories itself.

    Returns:
        The symlink-resolved path when the target exists, otherwise the absolute
        candidate path once its parent has been verified.

    Raises:
        InvalidArgumentError: The candidate contains a NUL byte.
        HiddenPathDeniedError: A client segment starts with ``.``.
        OutsideVaultError: The absolute path is not inside any vault.
        SymlinkEscapeError: The path resolves to a location outside every vault.
        ParentMissingError: The target does not exist and neither does its parent.
        ParentOutsideVaultError: The resolved parent lies outside every vault.
        NoteIOError: A dangling symlink cannot be followed (e.g. a link loop).
    """
    _reject_nul(candidate)
    if any(_is_hidden(part) for part in _client_segments(candidate, config)):
        raise HiddenPathDeniedError(candidate)

    expanded = expand_home(candidate)
    absolute = os.path.abspath(expanded)

    if not is_within_roots(normalize_path(absolute), config.normalized_roots):
        raise OutsideVaultError(absolute)

    real_path = _resolve_existing(absolute)
    if real_path is not None:
        if not is_within_roots(normalize_path(str(real_path)), config.normalized_roots):
            raise SymlinkEscapeError(absolute)
        return real_path

    # The target does not exist yet (or is a dangling link).
    target = Path(absolute)
    if target.is_symlink():
        link_target = _dangling_link_target(target)
        if not is_within_roots(normalize_path(str(link_target)), config.normalized_roots):
            raise SymlinkEscapeError(absolute)

    parent = target.parent
    real_parent = _resolve_existing(str(parent))
    if real_parent is None:
        if not create_parents:
            raise ParentMissingError(str(parent))
        real_parent = _nearest_existing_ancestor(target)
        if real_parent is None:
            raise ParentMissingError(str(parent))

    if not is_within_roots(normalize_path(str(real_parent)), config.normalized_roots):
        raise ParentOutsideVaultError(str(parent))

    return target


async def validate_path(
    candidate: str,
    config: NotesConfiguration,
    *,
    create_parents: bool = False,
) -> Path:
    """Async wrapper around :func:`validate_path_sync`.

    Resolution performs blocking syscalls, so it runs in a worker thread.
    """
    return await asyncio.to_thread(
        validate_path_sync, candidate, config, create_parents=create_parents
    )


def resolve_note_path(config: NotesConfiguration, note_path: str) -> str:
    """Anchor a client note path to the vault that holds it.

    Relative paths are tried against each vault in configuration order and the
    first one where the entry exists wins, so a search hit from any vault reads
    back. When no vault has it (a new note), the primary vault is used.
    Absolute paths are returned unchanged and must still pass
    :func:`validate_path`.
    """
    _reject_nul(note_path)
    if os.path.isabs(note_path):
        return note_path
    for root in config.roots:
        joined = os.path.join(str(root), note_path)
        if os.path.lexists(joined):
            return joined
    return os.path.join(str(config.primary_root), note_path)


async def locate_note(
    note_path: str,
    config: NotesConfiguration,
    *,
    create_parents: bool = False,
) -> Path:
    """Anchor ``note_path`` with :func:`resolve_note_path` and validate it."""

    def _locate() -> Path:
        return validate_path_sync(
            resolve_note_path(config, note_path), config, create_parents=create_parents
        )

    return await asyncio.to_thread(_locate)


def relative_display_path(root: Path, path: Path) -> str:
    """Convert a path found under ``root`` into a forward-slash display path."""
    return path.relative_to(root).as_posix()
