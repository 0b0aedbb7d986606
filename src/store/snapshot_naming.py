"""Snapshot file naming rules.

Snapshot names follow ``<stem>-<tag>-<index><suffix>``, derived from the
source file name, e.g. ``events-v1.2-0.yaml`` for ``events.yaml``.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import SNAPSHOT_NAME_SEPARATOR
from core.errors import EventSnapTagError

_FORBIDDEN_TAG_CHARACTERS = ("/", "\\", "\x00")
_RESERVED_TAGS = (".", "..")


def validate_tag(tag: str) -> str:
    """Check that a tag can be embedded in a single file name.

    Args:
        tag: Candidate tag.

    Returns:
        The unchanged tag.

    Raises:
        EventSnapTagError: If the tag is empty or contains path syntax.
    """
    if not tag:
        raise EventSnapTagError("Tag must be a non-empty string.")
    if tag in _RESERVED_TAGS or any(char in tag for char in _FORBIDDEN_TAG_CHARACTERS):
        raise EventSnapTagError(
            f"Tag '{tag}' cannot be used in a snapshot file name. "
            "Use a tag without path separators or pass --tag."
        )
    return tag


def snapshot_file_name(source_path: Path, tag: str, index: int) -> str:
    """Build the snapshot file name for one index."""
    return f"{_name_prefix(source_path, tag)}{index}{source_path.suffix}"


def parse_snapshot_index(file_name: str, source_path: Path, tag: str) -> int | None:
    """Extract the index from a snapshot file name.

    Args:
        file_name: Directory entry name.
        source_path: Source file whose stem and suffix shape the name.
        tag: Tag the name must be scoped to.

    Returns:
        Parsed index, or None when the name is not a snapshot of this tag.
    """
    prefix = _name_prefix(source_path, tag)
    suffix = source_path.suffix
    if not file_name.startswith(prefix) or not file_name.endswith(suffix):
        return None
    raw_index = file_name[len(prefix) : len(file_name) - len(suffix)]
    if not raw_index.isascii() or not raw_index.isdigit():
        return None
    # plain decimal only, "01" is not a snapshot name
    if str(int(raw_index)) != raw_index:
        return None
    return int(raw_index)


def _name_prefix(source_path: Path, tag: str) -> str:
    return f"{source_path.stem}{SNAPSHOT_NAME_SEPARATOR}{tag}{SNAPSHOT_NAME_SEPARATOR}"
