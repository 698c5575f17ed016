"""Tests for the simulate CLI command."""

import json

from click.testing import CliRunner

from warsim.cli.simulate import main


def test_single_game() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--seed", "42", "--shuffle", "fisher-yates"])

    assert result.exit_code == 0, result.output
    assert "Seed 42" in result.output
    assert "rounds" in result.output


def test_single_game_writes_history(tmp_path) -> None:
    output = tmp_path / "game.json"
    runner = CliRunner()
    result = runner.invoke(main, ["--seed", "3", "--max-rounds", "20", "-o", str(output)])

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["round_count"] == len(data["rounds"])
    assert data["round_count"] <= 20


def test_batch_summary(tmp_path) -> None:
    output = tmp_path / "summary.json"
    runner = CliRunner()
    result = runner.invoke(main, [
        "-n", "3", "--seed", "1", "--shuffle", "fisher-yates", "-o", str(output),
    ])

    assert result.exit_code == 0, result.output
    assert "Games: 3" in result.output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["games"] == 3


def test_uneven_player_count_fails() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--players", "3", "--seed", "1"])

    assert result.exit_code == 1
    assert "cannot be dealt evenly" in result.output


def test_rejects_unknown_shuffle() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--shuffle", "riffle"])
    assert result.exit_code == 2


def test_rejects_zero_games() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--games", "0"])
    assert result.exit_code == 2
