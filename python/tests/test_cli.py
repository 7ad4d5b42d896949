"""Command-line interface smoke tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ballsort.cli import app

runner = CliRunner()


def test_generate_writes_json(tmp_path: Path) -> None:
    out = tmp_path / "levels.json"
    result = runner.invoke(app, ["generate", "1", "4", "--out", str(out), "--seed", "3"])
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert sorted(data, key=int) == ["1", "2", "3", "4"]


def test_config_prints_parameters() -> None:
    result = runner.invoke(app, ["config", "1"])
    assert result.exit_code == 0, result.output
    assert "num_colors" in result.output
    assert "shuffle_moves" in result.output


def test_show_and_stats() -> None:
    assert runner.invoke(app, ["show", "3", "--seed", "1"]).exit_code == 0
    assert runner.invoke(app, ["stats", "1", "3", "--seed", "1"]).exit_code == 0


def test_show_reads_exported_file(tmp_path: Path) -> None:
    out = tmp_path / "levels.json"
    runner.invoke(app, ["generate", "1", "2", "--out", str(out), "--seed", "5"])
    result = runner.invoke(app, ["show", "2", "--file", str(out)])
    assert result.exit_code == 0, result.output


def test_show_does_not_judge_loaded_boards(tmp_path: Path) -> None:
    # A hand-written file need not match any generated config.
    path = tmp_path / "levels.json"
    solved = [["red"] * 4, ["blue"] * 4, [], []]
    path.write_text(json.dumps({"5": {"tubes": solved}}))
    result = runner.invoke(app, ["show", "5", "--file", str(path)])
    assert result.exit_code == 0, result.output
    assert "Not valid" not in result.output


@pytest.mark.parametrize("command", ["show", "solve"])
def test_malformed_level_file_exits_cleanly(tmp_path: Path, command: str) -> None:
    path = tmp_path / "levels.json"
    path.write_text(json.dumps({"1": {}}))
    result = runner.invoke(app, [command, "1", "--file", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "MALFORMED_BOARD" in result.output


def test_solve_small_level() -> None:
    result = runner.invoke(app, ["solve", "1", "--seed", "2"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_rejects_level_zero() -> None:
    result = runner.invoke(app, ["config", "0"])
    assert result.exit_code != 0


def test_progress(tmp_path: Path) -> None:
    result = runner.invoke(app, ["progress", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "Current level" in result.output
    result = runner.invoke(app, ["progress", "--data-dir", str(tmp_path), "--reset"])
    assert result.exit_code == 0
    assert (tmp_path / "progress.json").exists()
