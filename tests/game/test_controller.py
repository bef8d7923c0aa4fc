"""Tests for GameController."""

from __future__ import annotations

import pytest

from arcadechess.core.board import Board
from arcadechess.core.enums import CastlingRights, Color, Difficulty, GameStatus
from arcadechess.core.errors import IllegalMove
from arcadechess.core.move import Move
from arcadechess.core.position import Position
from arcadechess.core.types import D8, E2, E3, E4, E5, E7, F2, F3, G1, G2, G4, H3, H4
from arcadechess.game.controller import GameController
from arcadechess.game.interfaces import GamePhase
from arcadechess.game.player import AIPlayer, HumanPlayer
from arcadechess.game.state import GameState, MoveRecord
from arcadechess.settings import GameSettings

EMPTY = "........"


class _WrongMoveAI(AIPlayer):
    """Engine stand-in that answers with a move the position does not allow."""

    def choose_move(self, position: Position) -> Move | None:
        return Move(E7, E3)


def _human_game() -> GameController:
    ctrl = GameController()
    ctrl.new_game(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK))
    return ctrl


class TestHumanGame:
    def test_new_game_awaits_move(self) -> None:
        ctrl = _human_game()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.status == GameStatus.PLAYING
        assert ctrl.current_player is ctrl.player(Color.WHITE)

    def test_submit_legal_move(self) -> None:
        ctrl = _human_game()
        moves: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda record, _state: moves.append(record))

        assert ctrl.submit_move(E2, E4)
        assert len(moves) == 1
        assert moves[0].move == Move(E2, E4)
        assert ctrl.current_player is ctrl.player(Color.BLACK)

    def test_submit_illegal_move(self) -> None:
        ctrl = _human_game()
        moves: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda record, _state: moves.append(record))

        assert not ctrl.submit_move(E2, E5)
        assert not ctrl.submit_move(E7, E5)
        assert moves == []
        assert ctrl.state.ply_count == 0

    def test_move_event_receives_state(self) -> None:
        ctrl = _human_game()
        seen: list[GameState] = []
        ctrl.events.on_move.append(lambda _record, state: seen.append(state))
        ctrl.submit_move(E2, E4)
        assert seen == [ctrl.state]

    def test_game_over_event(self) -> None:
        ctrl = _human_game()
        results: list[GameStatus] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)

        for from_sq, to_sq in ((F2, F3), (E7, E5), (G2, G4), (D8, H4)):
            assert ctrl.submit_move(from_sq, to_sq)

        assert results == [GameStatus.BLACK_WINS]
        assert phases[-1] == GamePhase.GAME_OVER
        assert not ctrl.submit_move(E2, E4)

    def test_legal_moves_for(self) -> None:
        ctrl = _human_game()
        assert set(ctrl.legal_moves_for(G1)) == {F3, H3}
        assert ctrl.legal_moves_for(E7) == []

    def test_new_game_from_finished_position(self) -> None:
        pos = Position(
            Board.from_rows([".......k", EMPTY, ".....KQ.", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY]),
            Color.BLACK,
            CastlingRights.NONE,
        )
        ctrl = GameController()
        results: list[GameStatus] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.new_game(HumanPlayer(Color.WHITE), HumanPlayer(Color.BLACK), pos)

        assert results == [GameStatus.STALEMATE]
        assert ctrl.state.phase == GamePhase.GAME_OVER


class TestComputerGame:
    def test_vs_computer_assigns_sides(self) -> None:
        ctrl = GameController.vs_computer(GameSettings(difficulty="easy", seed=1))
        white = ctrl.player(Color.WHITE)
        black = ctrl.player(Color.BLACK)
        assert isinstance(white, HumanPlayer)
        assert isinstance(black, AIPlayer)
        assert black.difficulty == Difficulty.EASY

    def test_ai_replies_after_human_move(self) -> None:
        ctrl = GameController.vs_computer(GameSettings(difficulty="medium", seed=2))
        assert ctrl.play_ai_turn() is None

        ctrl.submit_move(E2, E4)
        assert ctrl.state.phase == GamePhase.THINKING
        assert ctrl.legal_moves_for(G1) == []

        record = ctrl.play_ai_turn()
        assert record is not None
        assert record.piece.color == Color.BLACK
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.state.turn == Color.WHITE

    def test_ai_opens_when_playing_white(self) -> None:
        ctrl = GameController.vs_computer(
            GameSettings(difficulty="easy", ai_color=Color.WHITE, seed=3)
        )
        assert ctrl.state.phase == GamePhase.THINKING
        record = ctrl.play_ai_turn()
        assert record is not None
        assert record.piece.color == Color.WHITE

    def test_request_move_gets_a_copy(self) -> None:
        requested: list[Position] = []
        ai = AIPlayer(Color.BLACK, Difficulty.EASY, on_request_move=requested.append)
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), ai)

        ctrl.submit_move(E2, E4)

        assert len(requested) == 1
        assert requested[0] is not ctrl.state.position
        assert requested[0].board == ctrl.state.position.board

    def test_apply_engine_move(self) -> None:
        ai = AIPlayer(Color.BLACK, Difficulty.EASY, on_request_move=lambda _pos: None)
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), ai)
        ctrl.submit_move(E2, E4)

        assert ctrl.apply_engine_move(Move(E7, E5))
        assert ctrl.state.ply_count == 2
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_hard_ai_takes_mate(self) -> None:
        pos = Position(
            Board.from_rows(
                ["r...k...", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, ".....PPP", "......K."]
            ),
            Color.BLACK,
            CastlingRights.NONE,
        )
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), AIPlayer(Color.BLACK, Difficulty.HARD), pos)

        record = ctrl.play_ai_turn()

        assert record is not None
        assert ctrl.status == GameStatus.BLACK_WINS
        assert ctrl.play_ai_turn() is None

    def test_human_cannot_move_for_thinking_ai(self) -> None:
        ctrl = GameController.vs_computer(GameSettings(difficulty="easy", seed=1))
        assert ctrl.submit_move(E2, E4)
        assert ctrl.state.phase == GamePhase.THINKING

        assert not ctrl.submit_move(E7, E5)
        assert ctrl.state.ply_count == 1
        assert ctrl.state.turn == Color.BLACK
        assert ctrl.state.phase == GamePhase.THINKING

    def test_engine_move_dropped_while_human_to_move(self) -> None:
        ctrl = GameController.vs_computer(GameSettings(difficulty="easy", seed=1))
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

        assert not ctrl.apply_engine_move(Move(E2, E4))
        assert ctrl.state.ply_count == 0
        assert not _human_game().apply_engine_move(Move(E2, E4))

    def test_apply_engine_move_rejects_illegal(self) -> None:
        ai = AIPlayer(Color.BLACK, Difficulty.EASY, on_request_move=lambda _pos: None)
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), ai)
        ctrl.submit_move(E2, E4)

        assert not ctrl.apply_engine_move(Move(E7, E3))
        assert ctrl.state.ply_count == 1
        assert ctrl.state.phase == GamePhase.THINKING

    def test_play_ai_turn_validates_engine_choice(self) -> None:
        ctrl = GameController()
        ctrl.new_game(HumanPlayer(Color.WHITE), _WrongMoveAI(Color.BLACK, Difficulty.EASY))
        ctrl.submit_move(E2, E4)

        with pytest.raises(IllegalMove):
            ctrl.play_ai_turn()
        assert ctrl.state.ply_count == 1
        assert ctrl.state.turn == Color.BLACK
