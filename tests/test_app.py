"""Tests for the console front end."""

from __future__ import annotations

import io

import pytest

from arcadechess.app import main, parse_move_text, run
from arcadechess.core.enums import Color, GameStatus
from arcadechess.core.types import E2, E4
from arcadechess.game.controller import GameController
from arcadechess.game.player import HumanPlayer
from arcadechess.settings import GameSettings


def _scripted(lines: list[str]):
    it = iter(lines)

    def read_line(_prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def _human_game() -> GameController:
    ctrl = GameController()
    ctrl.new_game(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK))
    return ctrl


class TestParseMoveText:
    @pytest.mark.parametrize("text", ["e2e4", "e2-e4", "e2 e4", " E2E4 "])
    def test_accepted_forms(self, text: str) -> None:
        assert parse_move_text(text) == (E2, E4)

    @pytest.mark.parametrize("text", ["", "e2", "e2e9", "castle"])
    def test_rejected(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_move_text(text)


class TestRun:
    def test_plays_to_checkmate(self) -> None:
        out = io.StringIO()
        status = run(_human_game(), _scripted(["f2f3", "e7e5", "g2g4", "d8h4"]), out)
        assert status == GameStatus.BLACK_WINS
        assert "Checkmate. Black wins." in out.getvalue()

    def test_reports_bad_input(self) -> None:
        out = io.StringIO()
        run(_human_game(), _scripted(["hello", "e2e5", "quit"]), out)
        text = out.getvalue()
        assert "Expected a move like e2e4" in text
        assert "That move is not allowed." in text

    def test_quit_leaves_game_running(self) -> None:
        ctrl = _human_game()
        status = run(ctrl, _scripted(["e2e4", "exit"]), io.StringIO())
        assert status == GameStatus.PLAYING
        assert ctrl.state.ply_count == 1

    def test_computer_replies(self) -> None:
        ctrl = GameController.vs_computer(GameSettings(difficulty="easy", seed=5))
        out = io.StringIO()
        run(ctrl, _scripted(["e2e4"]), out)
        assert ctrl.state.ply_count == 2
        assert ctrl.state.turn == Color.WHITE


class TestMain:
    def test_main_exits_cleanly_on_eof(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _eof(_prompt: str = "") -> str:
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert main(["--difficulty", "easy", "--seed", "1"]) == 0
