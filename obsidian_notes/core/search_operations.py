"""Recursive note search across every configured vault."""

from __future__ import annotations

import asyncio
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from obsidian_notes.constants import NOTE_EXTENSION
from obsidian_notes.core.vault_operations import relative_display_path, validate_path
from obsidian_notes.data_models import NotesConfiguration, SearchResult
from obsidian_notes.exceptions import NotesError

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


@dataclass(frozen=True)
class _DirectoryEntry:
    name: str
    path: Path
    is_dir: bool


def _compile_query(query: str) -> Optional[re.Pattern[str]]:
    """Compile ``query`` as a case-insensitive pattern, ``*`` acting as a wildcard.

    Returns ``None`` when the query is not a valid regular expression; callers
    then fall back to plain substring matching.
    """
    try:
        return re.compile(query.replace("*", ".*"), re.IGNORECASE)
    except re.error:
        return None


def build_matcher(query: str) -> Callable[[str], bool]:
    """Build the name predicate used by :func:`search_notes`.

    A name matches when it contains ``query`` case-insensitively, or when the
    query (with ``*`` wildcards) matches it as a regular expression.

    Examples:
        >>> build_matcher("daily")("2025 Daily.md")
        True
        >>> build_matcher("2025-*-01")("2025-10-01.md")
        True
        >>> build_matcher("[unclosed")("[unclosed] idea.md")
        True
    """
    needle = query.lower()
    pattern = _compile_query(query)

    def matches(name: str) -> bool:
        if needle in name.lower():
            return True
        return pattern is not None and pattern.search(name) is not None

    return matches


def _scan_directory(directory: Path) -> list[_DirectoryEntry]:
    with os.scandir(directory) as iterator:
        return [
            _DirectoryEntry(
                name=entry.name,
                path=Path(entry.path),
                is_dir=entry.is_dir(follow_symlinks=False),
            )
            for entry in iterator
        ]


# ==============================================================================
# SEARCH OPERATIONS
# ==============================================================================


async def _walk(
    root: Path,
    directory: Path,
    matches: Callable[[str], bool],
    config: NotesConfiguration,
    results: list[str],
) -> None:
    try:
        entries = await asyncio.to_thread(_scan_directory, directory)
    except OSError as exc:
        logger.warning("Skipping unreadable directory '%s': %s", directory, exc)
        return

    descents = []
    for entry in entries:
        try:
            await validate_path(str(entry.path), config)
        except NotesError as exc:
            logger.debug("Skipping '%s' during search: %s", entry.path, exc)
            continue

        if entry.name.endswith(NOTE_EXTENSION) and matches(entry.name):
            results.append(relative_display_path(root, entry.path))

        if entry.is_dir:
            descents.append(_walk(root, entry.path, matches, config, results))

    if descents:
        await asyncio.gather(*descents)


async def search_notes(query: str, config: NotesConfiguration) -> SearchResult:
    """Search every vault for notes whose file name matches ``query``.

    Each vault is walked concurrently, and so is every subdirectory within a
    vault. Entries that fail confinement validation (hidden entries, symlinks
    leaving the vaults) are skipped without aborting the rest of the walk;
    directories are descended whether or not their own name matched.

    Args:
        query: Case-insensitive substring, or a regular expression in which
            ``*`` acts as a wildcard. An empty query matches every note.
        config: Server configuration holding the vault roots and result limit.

    Returns:
        A :class:`SearchResult` with at most ``config.search_limit`` paths,
        each relative to the vault it was found in, and the total number of
        matches. Ordering across and within vaults is not defined.
    """
    matches = build_matcher(query)
    results: list[str] = []

    await asyncio.gather(
        *(_walk(root, root, matches, config, results) for root in config.roots)
    )

    logger.debug("Search for '%s' matched %d notes", query, len(results))
    return SearchResult(
        matches=tuple(results[: config.search_limit]),
        total=len(results),
        limit=config.search_limit,
    )
