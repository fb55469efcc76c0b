"""Configuration loading for the vault roots and write switch."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml

from obsidian_notes.constants import (
    CONFIG_PATH,
    CONFIG_PATH_ENV,
    ENABLE_WRITE_ENV,
    SEARCH_LIMIT,
    VAULTS_ENV,
)
from obsidian_notes.data_models import NotesConfiguration

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

_CONFIGURATION: Optional[NotesConfiguration] = None


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"'{name}' must be a boolean, got {value!r}")


def default_config_path(environ: Mapping[str, str] = os.environ) -> Path:
    """Return the configuration file path, honouring ``OBSIDIAN_NOTES_CONFIG``."""
    override = environ.get(CONFIG_PATH_ENV)
    return Path(override).expanduser() if override else CONFIG_PATH


def read_config_file(config_path: Path) -> dict[str, Any]:
    """Load the raw settings from a YAML configuration file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        A dictionary with ``vaults`` (list of path strings) and optionally
        ``enable_write`` and ``search_limit``. Empty when the file is missing.

    Raises:
        ValueError: If the file exists but does not provide the expected structure.
    """
    if not config_path.exists():
        return {}

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    settings: dict[str, Any] = {}

    vaults = raw_config.get("vaults")
    if vaults is not None:
        if isinstance(vaults, str):
            vaults = [vaults]
        if not isinstance(vaults, list) or not all(
            isinstance(entry, str) and entry.strip() for entry in vaults
        ):
            raise ValueError("'vaults' must be a list of directory paths")
        settings["vaults"] = [entry.strip() for entry in vaults]

    if "enable_write" in raw_config:
        settings["enable_write"] = _parse_bool(raw_config["enable_write"], "enable_write")

    if "search_limit" in raw_config:
        limit = raw_config["search_limit"]
        if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
            raise ValueError("'search_limit' must be a positive integer")
        settings["search_limit"] = limit

    return settings


def load_configuration(
    vaults: Optional[Sequence[str]] = None,
    enable_write: Optional[bool] = None,
    config_path: Optional[Path] = None,
    environ: Mapping[str, str] = os.environ,
) -> NotesConfiguration:
    """Build the server configuration from arguments, environment and file.

    Explicit arguments win over environment variables, which win over the YAML
    file.

    Args:
        vaults: Vault directories given on the command line.
        enable_write: Write switch given on the command line.
        config_path: YAML file to read. Defaults to :func:`default_config_path`.
        environ: Environment mapping (injectable for tests).

    Returns:
        A verified :class:`NotesConfiguration`.

    Raises:
        ValueError: If no vault is configured anywhere, or a setting is malformed.
        FileNotFoundError: If a configured vault does not exist.
        NotADirectoryError: If a configured vault is not a directory.
    """
    settings = read_config_file(config_path or default_config_path(environ))

    env_vaults = environ.get(VAULTS_ENV)
    if env_vaults:
        settings["vaults"] = [entry for entry in env_vaults.split(os.pathsep) if entry.strip()]

    env_write = environ.get(ENABLE_WRITE_ENV)
    if env_write is not None:
        settings["enable_write"] = _parse_bool(env_write, ENABLE_WRITE_ENV)

    if vaults:
        settings["vaults"] = list(vaults)
    if enable_write:
        settings["enable_write"] = True

    vault_paths = settings.get("vaults") or []
    if not vault_paths:
        raise ValueError(
            "No vault directories configured. Pass them on the command line, "
            f"set {VAULTS_ENV}, or list them under 'vaults' in the configuration file."
        )

    return NotesConfiguration.from_paths(
        vault_paths,
        enable_write=settings.get("enable_write", False),
        search_limit=settings.get("search_limit", SEARCH_LIMIT),
    )


def configure(configuration: NotesConfiguration) -> NotesConfiguration:
    """Install the configuration used by the MCP tools. Called once at startup."""
    global _CONFIGURATION
    _CONFIGURATION = configuration
    logger.info("Allowed directories: %s", ", ".join(str(root) for root in configuration.roots))
    logger.info("Write operations: %s", "enabled" if configuration.enable_write else "disabled")
    return configuration


def get_configuration() -> NotesConfiguration:
    """Return the installed configuration, loading it from file/env on first use."""
    if _CONFIGURATION is None:
        return configure(load_configuration())
    return _CONFIGURATION
