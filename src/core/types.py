"""Shared typed models.

This module defines immutable data models used by the sequencer,
store, SDK, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

TagProvider = Callable[[], str]


@dataclass(frozen=True)
class SnapshotRef:
    """One numbered snapshot of the source file.

    Attributes:
        tag: Release tag the snapshot is scoped to.
        index: Zero-based sequence number within the tag.
        path: Snapshot file location.
    """

    tag: str
    index: int
    path: Path


@dataclass(frozen=True)
class ArchiveResult:
    """Outcome of copying the source file into a new snapshot.

    Attributes:
        source_path: File that was copied.
        snapshot: Newly created snapshot.
    """

    source_path: Path
    snapshot: SnapshotRef


@dataclass(frozen=True)
class CompareResult:
    """Outcome of diffing a snapshot against the source file.

    Attributes:
        source_path: Current source file.
        snapshot: Snapshot used as the diff baseline.
        diff_lines: Unified diff lines, empty when contents match.
    """

    source_path: Path
    snapshot: SnapshotRef
    diff_lines: tuple[str, ...]

    @property
    def has_differences(self) -> bool:
        """Whether the snapshot and source differ."""
        return len(self.diff_lines) > 0
