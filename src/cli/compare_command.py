"""Compare command wiring for eventsnap CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import COMPARE_EXIT_DIFFERENT, COMPARE_EXIT_IDENTICAL
from store.snapshot_store import SnapshotStore


def add_compare_command(subparsers: Any) -> None:
    """Register compare subcommand."""
    parser = subparsers.add_parser(
        "compare",
        help="Diff the latest snapshot for the current tag against the source file",
    )
    parser.add_argument(
        "--index",
        type=int,
        help="Compare against this snapshot index instead of the latest",
    )


def run_compare_command(store: SnapshotStore, args: argparse.Namespace) -> int:
    """Print a unified diff; exit one when the files differ, like diff(1)."""
    result = store.compare(index=args.index)
    print(f"diff {result.snapshot.path} {result.source_path}")
    for line in result.diff_lines:
        print(line)
    return COMPARE_EXIT_DIFFERENT if result.has_differences else COMPARE_EXIT_IDENTICAL
