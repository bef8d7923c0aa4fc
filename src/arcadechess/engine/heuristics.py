"""Weak move pickers for the easy and medium tiers."""

from __future__ import annotations

import logging
import random

from arcadechess.core.attacks import is_in_check
from arcadechess.core.evaluation import PIECE_VALUES
from arcadechess.core.move import Move
from arcadechess.core.move_generator import all_legal_moves
from arcadechess.core.position import Position
from arcadechess.engine.search import IEngine, SearchResult

_LOGGER = logging.getLogger(__name__)

_NOISE = 50.0
_CHECK_BONUS = 30.0


class RandomEngine(IEngine):
    """Plays a uniformly random legal move."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def search(self, position: Position) -> SearchResult:
        moves = all_legal_moves(
            position.board,
            position.side_to_move,
            position.castling,
            position.en_passant,
        )
        if not moves:
            return SearchResult(None, 0, 0, 0)
        move = self._rng.choice(moves)
        _LOGGER.debug("random pick %s out of %d moves", move, len(moves))
        return SearchResult(move, 0, 0, len(moves))


class GreedyEngine(IEngine):
    """One-ply noisy greedy picker.

    Each legal move scores ``noise + captured_value / 10 + check_bonus``,
    with noise drawn from ``[0, 50)``; the highest score wins.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def search(self, position: Position) -> SearchResult:
        moves = all_legal_moves(
            position.board,
            position.side_to_move,
            position.castling,
            position.en_passant,
        )
        if not moves:
            return SearchResult(None, 0, 0, 0)

        best_move: Move | None = None
        best_score = float("-inf")
        for move in moves:
            score = self.score_move(position, move)
            if score > best_score:
                best_score = score
                best_move = move

        _LOGGER.debug("greedy pick %s (score=%.1f)", best_move, best_score)
        return SearchResult(best_move, 0, 1, len(moves))

    def score_move(self, position: Position, move: Move) -> float:
        score = self._rng.random() * _NOISE
        child = position.board.copy()
        captured = child.apply(move)
        if captured is not None:
            score += PIECE_VALUES[captured.piece_type] / 10
        if is_in_check(child, position.side_to_move.opposite):
            score += _CHECK_BONUS
        return score
