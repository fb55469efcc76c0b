"""Command-line entry point: ``obsidian-notes [VAULT ...] [--enable-write]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from obsidian_notes import load_configuration, run_server
from obsidian_notes.constants import LOG_LEVEL

logger = logging.getLogger("obsidian_notes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obsidian-notes",
        description="Serve notes from one or more Obsidian vaults over MCP (stdio).",
    )
    parser.add_argument(
        "vaults",
        nargs="*",
        metavar="VAULT",
        help="Vault directories to expose (overrides the configuration file).",
    )
    parser.add_argument(
        "-w",
        "--enable-write",
        action="store_true",
        help="Enable the write_note and update_note tools.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a vaults.yaml configuration file.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (written to stderr).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.getLogger().setLevel(args.log_level)

    try:
        configuration = load_configuration(
            vaults=args.vaults,
            enable_write=args.enable_write,
            config_path=args.config,
        )
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Usage: obsidian-notes <vault-directory> [--enable-write|-w]", file=sys.stderr)
        return 1

    try:
        run_server(configuration)
    except Exception:
        logger.exception("Fatal error running server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
