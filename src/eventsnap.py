"""Public SDK surface for eventsnap.

This module provides a stable import path for scripted use.
It re-exports the snapshot store, config, tag providers, and result models.
"""

from __future__ import annotations

from core.config import EventSnapConfig
from core.errors import (
    EventSnapConfigError,
    EventSnapError,
    EventSnapStoreError,
    EventSnapTagError,
)
from core.types import ArchiveResult, CompareResult, SnapshotRef, TagProvider
from store.snapshot_store import SnapshotStore
from vcs.git_tag import git_describe_tag_provider, static_tag_provider

__all__ = [
    "ArchiveResult",
    "CompareResult",
    "EventSnapConfig",
    "EventSnapConfigError",
    "EventSnapError",
    "EventSnapStoreError",
    "EventSnapTagError",
    "SnapshotRef",
    "SnapshotStore",
    "TagProvider",
    "git_describe_tag_provider",
    "static_tag_provider",
]
