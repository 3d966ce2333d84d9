"""Tests for the console entry point."""

import json

import pytest

from blackjack.errors import InvalidInput
from config import AppConfig, LoggingConfig, SimulationConfig
from console.main import main, parse_player_count, report, run


def _config(output: str = "text", seed: int | None = 5) -> AppConfig:
    return AppConfig(
        logging=LoggingConfig(level="WARNING"),
        simulation=SimulationConfig(seed=seed, output=output),
    )


def _answer(monkeypatch, text: str) -> None:
    monkeypatch.setattr("builtins.input", lambda *args: text)


class TestParsePlayerCount:
    """Tests for parse_player_count."""

    @pytest.mark.parametrize("text, expected", [("3", 3), (" 7\n", 7), ("0", 0)])
    def test_valid(self, text, expected):
        assert parse_player_count(text) == expected

    @pytest.mark.parametrize("text", ["", "three", "2.5", "-1", "0x10"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInput):
            parse_player_count(text)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            parse_player_count("abc")


class TestRun:
    """Tests for run and report."""

    def test_same_seed_same_game(self):
        first = run(4, _config(seed=11))
        second = run(4, _config(seed=11))

        assert first.winner_ids == second.winner_ids
        assert first.dealer.hand == second.dealer.hand

    def test_text_report(self):
        text = report(run(2, _config()), _config())
        assert text.startswith("Dealer: -1 score: ")
        assert "Winners:" in text
        assert text.endswith("The End")

    def test_json_report(self):
        result = run(2, _config())
        data = json.loads(report(result, _config(output="json")))

        assert data["dealer"]["id"] == -1
        assert data["winners"] == result.winner_ids
        assert len(data["players"]) == 2


class TestMain:
    """Tests for main."""

    def test_success(self, monkeypatch, capsys):
        _answer(monkeypatch, "3")

        assert main(_config()) == 0

        out = capsys.readouterr().out
        assert "Welcome to BlackJack" in out
        assert "Enter the no. of players in the game" in out
        assert "The End" in out

    def test_json_output(self, monkeypatch, capsys):
        _answer(monkeypatch, "2")

        assert main(_config(output="json")) == 0

        out = capsys.readouterr().out
        data = json.loads(out[out.index("{"):])
        assert data["dealer_state"] in ("STAY", "BLACKJACK", "BUSTED")
        assert data["rounds"] >= 1

    def test_invalid_input_fails(self, monkeypatch, capsys):
        _answer(monkeypatch, "many")

        assert main(_config()) == 1
        assert "Error" in capsys.readouterr().err

    def test_crowded_table_fails(self, monkeypatch, capsys):
        _answer(monkeypatch, "30")

        assert main(_config()) == 1
        assert "No card left in deck" in capsys.readouterr().err

    def test_no_input_fails(self, monkeypatch):
        def eof(*args):
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)

        assert main(_config()) == 1
