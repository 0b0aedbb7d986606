"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import copy_events_fixture


def _base_args(tmp_path: Path) -> list[str]:
    source_path = copy_events_fixture(tmp_path)
    return [
        "--source",
        str(source_path),
        "--snapshot-dir",
        str(tmp_path / "old_data"),
        "--tag",
        "v1.2",
    ]


def test_cli_archive_prints_copy_line_and_snapshot_path(tmp_path, capsys) -> None:
    """Archive should echo the copy and print the created snapshot path."""
    exit_code = main([*_base_args(tmp_path), "archive"])
    output_lines = capsys.readouterr().out.strip().splitlines()

    expected_path = tmp_path.resolve() / "old_data" / "events-v1.2-0.yaml"
    assert exit_code == 0
    assert output_lines[0].startswith("cp ") and output_lines[-1] == str(expected_path)


def test_cli_compare_returns_zero_after_archive(tmp_path, capsys) -> None:
    """Compare right after archive should report no differences."""
    args = _base_args(tmp_path)
    main([*args, "archive"])
    _ = capsys.readouterr()

    exit_code = main([*args, "compare"])
    output_lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and len(output_lines) == 1
    assert output_lines[0].startswith("diff ")


def test_cli_compare_returns_one_when_source_changed(tmp_path, capsys) -> None:
    """Compare should exit one and print diff lines after an edit."""
    args = _base_args(tmp_path)
    main([*args, "archive"])
    (tmp_path / "events.yaml").write_text("events: []\n", encoding="utf-8")
    _ = capsys.readouterr()

    exit_code = main([*args, "compare"])
    output = capsys.readouterr().out

    assert exit_code == 1 and "+events: []" in output


def test_cli_compare_without_snapshots_reports_error(tmp_path, capsys) -> None:
    """Compare with nothing archived should exit two with a readable error."""
    exit_code = main([*_base_args(tmp_path), "compare"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert captured.err.startswith("error=No snapshot found")
    assert captured.out == ""


def test_cli_list_prints_index_and_path_rows(tmp_path, capsys) -> None:
    """List should print one tab-separated row per snapshot."""
    args = _base_args(tmp_path)
    main([*args, "archive"])
    main([*args, "archive"])
    _ = capsys.readouterr()

    exit_code = main([*args, "list"])
    rows = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert [row.split("\t")[0] for row in rows] == ["0", "1"]


def test_cli_rejects_missing_command(capsys) -> None:
    """The CLI should require a subcommand."""
    with pytest.raises(SystemExit):
        main([])

    assert "required" in capsys.readouterr().err


def test_cli_reports_repo_dir_that_is_a_file(tmp_path, monkeypatch, capsys) -> None:
    """A repo_dir pointing at a file should exit two instead of raising."""
    copy_events_fixture(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("EVENTSNAP_REPO_DIR", str(tmp_path / "events.yaml"))

    exit_code = main(["archive"])

    assert exit_code == 2 and capsys.readouterr().err.startswith("error=")
    assert not (tmp_path / "old_data").exists()


def test_cli_rejects_empty_tag(tmp_path, capsys) -> None:
    """An empty --tag should be rejected rather than falling back to git."""
    source_path = copy_events_fixture(tmp_path)
    args = ["--source", str(source_path), "--snapshot-dir", str(tmp_path / "old_data")]

    exit_code = main([*args, "--tag", "", "archive"])

    assert exit_code == 2
    assert capsys.readouterr().err.startswith("error=Tag must be a non-empty string")
