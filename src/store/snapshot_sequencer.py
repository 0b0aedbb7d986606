"""Sequential snapshot index allocation.

This module finds free and filled slots in a tag-scoped snapshot family
by probing the filesystem; existence on disk is the only registry.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import FIRST_SNAPSHOT_INDEX
from store.snapshot_naming import snapshot_file_name


def snapshot_path(snapshot_dir: Path, source_path: Path, tag: str, index: int) -> Path:
    """Return the candidate path for one snapshot index."""
    return snapshot_dir / snapshot_file_name(source_path, tag, index)


def next_free_index(
    snapshot_dir: Path,
    source_path: Path,
    tag: str,
    start: int = FIRST_SNAPSHOT_INDEX,
) -> int:
    """Find the smallest index at or after ``start`` with no snapshot file.

    Args:
        snapshot_dir: Directory holding snapshots; may not exist yet.
        source_path: Source file whose name shapes snapshot names.
        tag: Current tag.
        start: First index to probe.

    Returns:
        First free index; ``start`` when nothing exists there.
    """
    index = start
    while snapshot_path(snapshot_dir, source_path, tag, index).exists():
        index += 1
    return index


def last_filled_index(snapshot_dir: Path, source_path: Path, tag: str) -> int | None:
    """Return the index just before the first free slot.

    Returns:
        Index of the last contiguous snapshot, or None when slot 0 is free.
    """
    free_index = next_free_index(snapshot_dir, source_path, tag)
    if free_index == FIRST_SNAPSHOT_INDEX:
        return None
    return free_index - 1
