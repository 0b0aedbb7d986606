"""Unit tests for the public SDK surface."""

from __future__ import annotations

from dataclasses import replace

import eventsnap
from tests.fixture_paths import copy_events_fixture


def test_sdk_archives_with_injected_tag_provider(tmp_path) -> None:
    """SDK users should be able to inject paths and a tag provider."""
    source_path = copy_events_fixture(tmp_path)
    config = replace(
        eventsnap.EventSnapConfig.defaults(),
        source_path=source_path,
        snapshot_dir=tmp_path / "snaps",
    )
    store = eventsnap.SnapshotStore(config, tag_provider=eventsnap.static_tag_provider("v1.2"))

    result = store.archive()

    assert isinstance(result, eventsnap.ArchiveResult)
    assert result.snapshot.path.name == "events-v1.2-0.yaml"


def test_sdk_errors_share_base_class() -> None:
    """All exported errors should derive from the package base error."""
    assert issubclass(eventsnap.EventSnapStoreError, eventsnap.EventSnapError)
    assert issubclass(eventsnap.EventSnapTagError, eventsnap.EventSnapError)
