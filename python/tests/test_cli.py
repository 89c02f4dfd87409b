"""Command-line interface, driven through Typer's test runner."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from npuzzle.cli import app

runner = CliRunner()


def test_solves_text_file(fixtures_dir: Path) -> None:
    result = runner.invoke(app, [str(fixtures_dir / "puzzle04.txt"), "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "problem solved in 4 steps" in result.output
    assert "------------PATH------------" in result.output
    assert " 8  1  3 " in result.output
    assert " 1  2  3 \n 4  5  6 \n 7  8  0 " in result.output


@pytest.mark.parametrize(
    "name, steps",
    [("puzzle00.txt", 0), ("puzzle01.txt", 1), ("puzzle2x2-01.txt", 1)],
)
def test_fixture_move_counts(fixtures_dir: Path, name: str, steps: int) -> None:
    result = runner.invoke(app, [str(fixtures_dir / name), "--seed", "3"])
    assert result.exit_code == 0, result.output
    assert f"problem solved in {steps} steps" in result.output


def test_reports_unsolvable(fixtures_dir: Path) -> None:
    result = runner.invoke(
        app,
        [str(fixtures_dir / "puzzle3x3-unsolvable.txt"), "--closed-set", "--seed", "2"],
    )
    assert result.exit_code == 0, result.output
    assert "board not solvable" in result.output
    assert "PATH" not in result.output


def test_rich_frontend(fixtures_dir: Path) -> None:
    result = runner.invoke(
        app, [str(fixtures_dir / "puzzle04.json"), "-f", "rich", "--seed", "1"]
    )
    assert result.exit_code == 0, result.output
    assert "4 moves" in result.output


def test_rich_frontend_unsolvable(fixtures_dir: Path) -> None:
    result = runner.invoke(
        app,
        [
            str(fixtures_dir / "puzzle3x3-unsolvable.txt"),
            "-f", "rich", "--closed-set", "--seed", "2",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Not solvable" in result.output


def test_random_board() -> None:
    result = runner.invoke(app, ["--random", "3", "--steps", "10", "--seed", "5"])
    assert result.exit_code == 0, result.output
    assert "problem solved in" in result.output


def test_twins(fixtures_dir: Path) -> None:
    result = runner.invoke(app, [str(fixtures_dir / "puzzle04.txt"), "--twins", "3"])
    assert result.exit_code == 0, result.output
    assert "twin: 0" in result.output
    assert "twin: 2" in result.output
    assert "problem solved" not in result.output


def test_twins_of_single_cell_board(tmp_path: Path) -> None:
    path = tmp_path / "one.txt"
    path.write_text("1\n0\n")
    result = runner.invoke(app, [str(path), "--twins", "2"])
    assert result.exit_code == 0, result.output
    assert "NO TWIN!" in result.output


def test_node_limit_exits_with_error(fixtures_dir: Path) -> None:
    result = runner.invoke(app, [str(fixtures_dir / "puzzle04.txt"), "--max-nodes", "3"])
    assert result.exit_code == 1
    assert "Search aborted" in result.output


def test_bad_file_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("3\n1 2 3\n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 1
    assert "Expected 9 tiles" in result.output


def test_requires_exactly_one_source(fixtures_dir: Path) -> None:
    assert runner.invoke(app, []).exit_code == 2
    both = runner.invoke(app, [str(fixtures_dir / "puzzle04.txt"), "--random", "3"])
    assert both.exit_code == 2
