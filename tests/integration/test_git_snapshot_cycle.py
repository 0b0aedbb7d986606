"""Integration test for archive and compare against a real git repository."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import copy_events_fixture

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

_GIT_IDENTITY = (
    "-c",
    "user.name=eventsnap",
    "-c",
    "user.email=eventsnap@example.com",
    "-c",
    "commit.gpgsign=false",
    "-c",
    "tag.gpgsign=false",
)


def _git(repo_dir: Path, *args: str) -> None:
    subprocess.run(
        ["git", *_GIT_IDENTITY, *args],
        cwd=repo_dir,
        check=True,
        capture_output=True,
    )


def _init_tagged_repo(repo_dir: Path, tag: str) -> None:
    _git(repo_dir, "init", "--quiet")
    _git(repo_dir, "add", "events.yaml")
    _git(repo_dir, "commit", "--quiet", "-m", "track events")
    _git(repo_dir, "tag", "-a", tag, "-m", f"release {tag}")


def test_archive_then_compare_uses_git_tag(tmp_path, monkeypatch, capsys) -> None:
    """Running with no flags should use the nearest annotated tag and cwd paths."""
    copy_events_fixture(tmp_path)
    _init_tagged_repo(tmp_path, "v1.2")
    monkeypatch.chdir(tmp_path)

    archive_exit = main(["archive"])
    compare_exit = main(["compare"])
    output = capsys.readouterr().out

    snapshot = tmp_path / "old_data" / "events-v1.2-0.yaml"
    assert archive_exit == 0 and compare_exit == 0
    assert snapshot.read_bytes() == (tmp_path / "events.yaml").read_bytes()
    assert "events-v1.2-0.yaml" in output


def test_archive_without_tags_reports_error(tmp_path, monkeypatch, capsys) -> None:
    """A repository without annotated tags should fail tag lookup."""
    copy_events_fixture(tmp_path)
    _git(tmp_path, "init", "--quiet")
    monkeypatch.chdir(tmp_path)

    exit_code = main(["archive"])

    assert exit_code == 2 and capsys.readouterr().err.startswith("error=")
    assert not (tmp_path / "old_data").exists()
