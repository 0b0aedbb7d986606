"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_EVENTSNAP_ENV_VARS = (
    "EVENTSNAP_CONFIG",
    "EVENTSNAP_SOURCE_PATH",
    "EVENTSNAP_SNAPSHOT_DIR",
    "EVENTSNAP_REPO_DIR",
    "EVENTSNAP_TAG",
    "EVENTSNAP_LIGHTWEIGHT_TAGS",
    "EVENTSNAP_LOG_LEVEL",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host EVENTSNAP_* variables out of every test."""
    for name in _EVENTSNAP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
