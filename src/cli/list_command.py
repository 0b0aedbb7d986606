"""List command wiring for eventsnap CLI."""

from __future__ import annotations

from typing import Any

from store.snapshot_store import SnapshotStore


def add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    subparsers.add_parser("list", help="List snapshots for the current tag")


def run_list_command(store: SnapshotStore) -> int:
    """Print snapshots as tab-separated index and path rows."""
    for snapshot in store.list_snapshots():
        print(f"{snapshot.index}\t{snapshot.path}")
    return 0
