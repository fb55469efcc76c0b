"""Data models for the vault configuration and operation results."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from obsidian_notes.constants import SEARCH_LIMIT
from obsidian_notes.core.vault_operations import normalize_path


@dataclass(frozen=True)
class NotesConfiguration:
    """Immutable server configuration shared by every note operation.

    Built once at startup and passed into the core explicitly. ``roots`` holds
    absolute, symlink-resolved vault directories; ``normalized_roots`` holds the
    matching comparison keys produced by
    :func:`obsidian_notes.core.vault_operations.normalize_path`.
    """

    roots: tuple[Path, ...]
    enable_write: bool = False
    search_limit: int = SEARCH_LIMIT
    normalized_roots: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.roots:
            raise ValueError("At least one vault directory must be configured")
        if self.search_limit < 1:
            raise ValueError("search_limit must be a positive integer")
        object.__setattr__(
            self,
            "normalized_roots",
            tuple(normalize_path(str(root)) for root in self.roots),
        )

    @classmethod
    def from_paths(
        cls,
        paths: Iterable[str | Path],
        enable_write: bool = False,
        search_limit: int = SEARCH_LIMIT,
    ) -> "NotesConfiguration":
        """Build a configuration from raw vault paths, verifying each one.

        Args:
            paths: Vault directories. ``~`` is expanded and symlinks are resolved.
            enable_write: Whether ``write_note``/``update_note`` are allowed.
            search_limit: Maximum number of matches returned by a search.

        Returns:
            A validated :class:`NotesConfiguration`.

        Raises:
            ValueError: If no paths are given.
            FileNotFoundError: If a vault directory does not exist.
            NotADirectoryError: If a vault path is not a directory.
        """
        roots: list[Path] = []
        for raw_path in paths:
            expanded = Path(raw_path).expanduser()
            if not expanded.exists():
                raise FileNotFoundError(f"Vault directory not found: {raw_path}")
            if not expanded.is_dir():
                raise NotADirectoryError(f"Vault path is not a directory: {raw_path}")
            resolved = expanded.resolve(strict=True)
            if resolved not in roots:
                roots.append(resolved)

        return cls(roots=tuple(roots), enable_write=enable_write, search_limit=search_limit)

    @property
    def primary_root(self) -> Path:
        """The vault that relative note paths are resolved against."""
        return self.roots[0]

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "vaults": [str(root) for root in self.roots],
            "write_enabled": self.enable_write,
            "search_limit": self.search_limit,
        }


@dataclass(frozen=True)
class NoteReadResult:
    """Outcome of reading one path from a ``read_notes`` batch."""

    path: str
    content: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_payload(self) -> dict[str, Any]:
        if self.ok:
            return {"path": self.path, "content": self.content}
        return {"path": self.path, "error": self.error}


@dataclass(frozen=True)
class SearchResult:
    """Bounded search matches plus the true number of matches found."""

    matches: tuple[str, ...]
    total: int
    limit: int = SEARCH_LIMIT

    @property
    def truncated(self) -> bool:
        return self.total > self.limit

    @property
    def omitted(self) -> int:
        return max(0, self.total - self.limit)

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "matches": list(self.matches),
            "total": self.total,
            "truncated": self.truncated,
            "omitted": self.omitted,
        }
