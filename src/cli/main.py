"""eventsnap CLI entry points.

This module exposes the archive, compare, and list commands.
It maps argparse commands onto snapshot store calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from cli.archive_command import add_archive_command, run_archive_command
from cli.compare_command import add_compare_command, run_compare_command
from cli.list_command import add_list_command, run_list_command
from core.config import EventSnapConfig
from core.constants import CLI_EXIT_ERROR
from core.errors import EventSnapError
from core.logging_config import configure_logging
from store.snapshot_store import SnapshotStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="eventsnap",
        description="Archive and compare tag-scoped snapshots of events.yaml",
    )
    parser.add_argument("--config", help="YAML config file (default: .eventsnap.yaml if present)")
    parser.add_argument("--source", help="Override the source file to snapshot")
    parser.add_argument("--snapshot-dir", help="Override the snapshot directory")
    parser.add_argument("--tag", help="Use this tag instead of git describe")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_archive_command(subparsers)
    add_compare_command(subparsers)
    add_list_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the eventsnap CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        store = _build_store(args)
        if args.command == "archive":
            return run_archive_command(store)
        if args.command == "compare":
            return run_compare_command(store, args)
        if args.command == "list":
            return run_list_command(store)
    except EventSnapError as error:
        print(f"error={error}", file=sys.stderr)
        return CLI_EXIT_ERROR
    parser.error(f"Unsupported command: {args.command}")
    return CLI_EXIT_ERROR


def _build_store(args: argparse.Namespace) -> SnapshotStore:
    """Build snapshot store with CLI overrides applied.

    Args:
        args: Parsed CLI args.

    Returns:
        Configured snapshot store.
    """
    config = EventSnapConfig.from_env(args.config)
    if args.source:
        config = replace(config, source_path=_resolve_path(args.source))
    if args.snapshot_dir:
        config = replace(config, snapshot_dir=_resolve_path(args.snapshot_dir))
    if args.tag is not None:
        config = replace(config, tag=args.tag)
    configure_logging(config.log_level)
    return SnapshotStore(config)


def _resolve_path(raw_value: str) -> Path:
    return Path(raw_value).expanduser().resolve()
