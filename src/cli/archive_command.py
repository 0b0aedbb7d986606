"""Archive command wiring for eventsnap CLI."""

from __future__ import annotations

from typing import Any

from store.snapshot_store import SnapshotStore


def add_archive_command(subparsers: Any) -> None:
    """Register archive subcommand."""
    subparsers.add_parser(
        "archive",
        help="Copy the source file into the next numbered snapshot for the current tag",
    )


def run_archive_command(store: SnapshotStore) -> int:
    """Archive the source file and print the created snapshot path."""
    result = store.archive()
    print(f"cp {result.source_path} {result.snapshot.path}")
    print(result.snapshot.path)
    return 0
