"""Line-based diff between a snapshot and the source file."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Iterable, Iterator

from core.errors import EventSnapStoreError

NO_NEWLINE_MARKER = "\\ No newline at end of file"
_HEADER_PREFIXES = ("--- ", "+++ ", "@@ ")


def diff_files(snapshot_path: Path, source_path: Path) -> tuple[str, ...]:
    """Render a unified diff from snapshot to source.

    Files are compared byte for byte. Line endings are kept, so a CRLF/LF
    change shows up as changed lines. Bytes that are not UTF-8 are shown
    with replacement characters.

    Args:
        snapshot_path: Baseline file, the "from" side.
        source_path: Current file, the "to" side.

    Returns:
        Diff lines without line terminators; empty when files match.

    Raises:
        EventSnapStoreError: If either file cannot be read.
    """
    snapshot_bytes = _read_bytes(snapshot_path)
    source_bytes = _read_bytes(source_path)
    if snapshot_bytes == source_bytes:
        return ()
    snapshot_lines = _split_lines(snapshot_bytes.decode("utf-8", errors="replace"))
    source_lines = _split_lines(source_bytes.decode("utf-8", errors="replace"))
    if snapshot_lines == source_lines:
        # bytes differ only where decoding replaced them
        return (f"Files {snapshot_path} and {source_path} differ",)
    diff = difflib.unified_diff(
        snapshot_lines,
        source_lines,
        fromfile=str(snapshot_path),
        tofile=str(source_path),
        lineterm="",
    )
    return tuple(_strip_terminators(diff))


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as error:
        raise EventSnapStoreError(
            f"Failed to read {path} for comparison: {error}."
        ) from error


def _split_lines(text: str) -> list[str]:
    """Split on newlines only, keeping terminators."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _strip_terminators(diff: Iterable[str]) -> Iterator[str]:
    """Drop line endings and flag content lines that had none."""
    for line in diff:
        if line.endswith("\n"):
            yield line[:-1]
        elif line.startswith(_HEADER_PREFIXES):
            yield line
        else:
            yield line
            yield NO_NEWLINE_MARKER
