"""Snapshot store for the tracked source file.

This module archives the source file into numbered, tag-scoped snapshots
and compares the source against the latest or a chosen snapshot.
"""

from __future__ import annotations

from pathlib import Path
import shutil

from core.config import EventSnapConfig
from core.constants import MAX_ARCHIVE_ATTEMPTS
from core.errors import EventSnapStoreError
from core.logging_config import get_logger
from core.types import ArchiveResult, CompareResult, SnapshotRef, TagProvider
from store.snapshot_diff import diff_files
from store.snapshot_naming import parse_snapshot_index, validate_tag
from store.snapshot_sequencer import last_filled_index, next_free_index, snapshot_path
from vcs.git_tag import git_describe_tag_provider, static_tag_provider

_LOGGER = get_logger(__name__)


class SnapshotStore:
    """Filesystem-backed snapshot store.

    This class owns the snapshot directory for one source file and
    resolves the current tag through an injectable provider.
    """

    def __init__(
        self,
        config: EventSnapConfig,
        tag_provider: TagProvider | None = None,
    ) -> None:
        """Initialize snapshot store from config.

        Args:
            config: Runtime configuration.
            tag_provider: Optional tag source; defaults to the configured tag
                or ``git describe`` in the configured repository.
        """
        self._config = config
        self._tag_provider = tag_provider or _default_tag_provider(config)

    @property
    def source_path(self) -> Path:
        return self._config.source_path

    @property
    def snapshot_dir(self) -> Path:
        return self._config.snapshot_dir

    def current_tag(self) -> str:
        """Resolve and validate the current tag.

        Raises:
            EventSnapTagError: If lookup fails or the tag is not file-name safe.
        """
        return validate_tag(self._tag_provider())

    def archive(self) -> ArchiveResult:
        """Copy the source file into the next free snapshot slot.

        Returns:
            Archive result naming the created snapshot.

        Raises:
            EventSnapTagError: If the current tag cannot be resolved.
            EventSnapStoreError: If the directory or copy fails.
        """
        tag = self.current_tag()
        source_path = self._config.source_path
        if not source_path.is_file():
            raise EventSnapStoreError(
                f"Source file not found at {source_path}. "
                "Set source_path or run from the directory holding it."
            )
        self._ensure_snapshot_dir()
        index = next_free_index(self.snapshot_dir, source_path, tag)
        for _ in range(MAX_ARCHIVE_ATTEMPTS):
            target_path = snapshot_path(self.snapshot_dir, source_path, tag, index)
            if _copy_exclusive(source_path, target_path):
                snapshot = SnapshotRef(tag=tag, index=index, path=target_path)
                _LOGGER.info(
                    "snapshot_archived",
                    tag=tag,
                    index=index,
                    source_path=str(source_path),
                    snapshot_path=str(target_path),
                )
                return ArchiveResult(source_path=source_path, snapshot=snapshot)
            _LOGGER.warning("snapshot_archive_conflict", tag=tag, index=index)
            index = next_free_index(self.snapshot_dir, source_path, tag, start=index + 1)
        raise EventSnapStoreError(
            f"Could not claim a free snapshot slot for tag '{tag}' in {self.snapshot_dir} "
            f"after {MAX_ARCHIVE_ATTEMPTS} attempts. Another archive may be running."
        )

    def compare(self, index: int | None = None) -> CompareResult:
        """Diff a snapshot against the current source file.

        Args:
            index: Snapshot to compare; the last filled slot when omitted.

        Returns:
            Compare result with unified diff lines.

        Raises:
            EventSnapTagError: If the current tag cannot be resolved.
            EventSnapStoreError: If no matching snapshot exists or reads fail.
        """
        snapshot = self._resolve_snapshot(index)
        source_path = self._config.source_path
        if not source_path.is_file():
            raise EventSnapStoreError(
                f"Source file not found at {source_path}. Nothing to compare against."
            )
        diff_lines = diff_files(snapshot.path, source_path)
        result = CompareResult(
            source_path=source_path,
            snapshot=snapshot,
            diff_lines=diff_lines,
        )
        _LOGGER.info(
            "snapshot_compared",
            tag=snapshot.tag,
            index=snapshot.index,
            snapshot_path=str(snapshot.path),
            has_differences=result.has_differences,
        )
        return result

    def latest_snapshot(self) -> SnapshotRef | None:
        """Return the last contiguous snapshot for the current tag, if any."""
        return self._latest_for_tag(self.current_tag())

    def list_snapshots(self) -> list[SnapshotRef]:
        """List snapshots for the current tag ordered by index.

        Returns:
            Snapshot references; empty when the directory does not exist.
        """
        tag = self.current_tag()
        if not self.snapshot_dir.is_dir():
            return []
        snapshots = []
        for entry in self.snapshot_dir.iterdir():
            index = parse_snapshot_index(entry.name, self.source_path, tag)
            if index is None or not entry.is_file():
                continue
            snapshots.append(SnapshotRef(tag=tag, index=index, path=entry))
        return sorted(snapshots, key=lambda item: item.index)

    def _latest_for_tag(self, tag: str) -> SnapshotRef | None:
        index = last_filled_index(self.snapshot_dir, self.source_path, tag)
        if index is None:
            return None
        path = snapshot_path(self.snapshot_dir, self.source_path, tag, index)
        return SnapshotRef(tag=tag, index=index, path=path)

    def _resolve_snapshot(self, index: int | None) -> SnapshotRef:
        """Resolve the snapshot used as the compare baseline.

        Raises:
            EventSnapStoreError: If the snapshot does not exist.
        """
        tag = self.current_tag()
        if index is None:
            latest = self._latest_for_tag(tag)
            if latest is None:
                raise EventSnapStoreError(
                    f"No snapshot found for tag '{tag}' in {self.snapshot_dir}. "
                    "Run archive before compare."
                )
            return latest
        if index < 0:
            raise EventSnapStoreError(f"Snapshot index must be non-negative, got {index}.")
        path = snapshot_path(self.snapshot_dir, self.source_path, tag, index)
        if not path.is_file():
            raise EventSnapStoreError(
                f"No snapshot found for tag '{tag}' at index {index} ({path}). "
                "Use list to discover existing snapshots."
            )
        return SnapshotRef(tag=tag, index=index, path=path)

    def _ensure_snapshot_dir(self) -> None:
        try:
            self.snapshot_dir.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise EventSnapStoreError(
                f"Failed to create snapshot directory {self.snapshot_dir}: {error}."
            ) from error


def _default_tag_provider(config: EventSnapConfig) -> TagProvider:
    if config.tag is not None:
        return static_tag_provider(config.tag)
    return git_describe_tag_provider(config.repo_dir, lightweight=config.lightweight_tags)


def _copy_exclusive(source_path: Path, target_path: Path) -> bool:
    """Copy bytes into a target that must not exist yet.

    Returns:
        False when the target already exists, True once copied.

    Raises:
        EventSnapStoreError: If reading or writing fails.
    """
    try:
        target_file = target_path.open("xb")
    except FileExistsError:
        return False
    except OSError as error:
        raise EventSnapStoreError(
            f"Failed to create snapshot {target_path}: {error}."
        ) from error
    try:
        with target_file, source_path.open("rb") as source_file:
            shutil.copyfileobj(source_file, target_file)
    except OSError as error:
        # never leave a partial snapshot behind in a claimed slot
        target_path.unlink(missing_ok=True)
        raise EventSnapStoreError(
            f"Failed to copy {source_path} to {target_path}: {error}."
        ) from error
    return True
