"""Difficulty-to-engine resolution and the pure ``ai_move`` entry point."""

from __future__ import annotations

import random

from arcadechess.core.board import Board
from arcadechess.core.enums import CastlingRights, Color, Difficulty
from arcadechess.core.move import Move
from arcadechess.core.position import Position
from arcadechess.core.types import Square
from arcadechess.engine.heuristics import GreedyEngine, RandomEngine
from arcadechess.engine.minimax import MinimaxEngine
from arcadechess.engine.search import IEngine, SearchLimits


def create_engine(
    difficulty: Difficulty | str,
    *,
    rng: random.Random | None = None,
    limits: SearchLimits | None = None,
) -> IEngine:
    """Engine implementing the policy of *difficulty*."""
    level = Difficulty(difficulty)
    if level == Difficulty.EASY:
        return RandomEngine(rng)
    if level == Difficulty.MEDIUM:
        return GreedyEngine(rng)
    return MinimaxEngine(limits)


def ai_move(
    board: Board,
    difficulty: Difficulty | str,
    castling: CastlingRights,
    en_passant: Square | None,
    color: Color = Color.BLACK,
    *,
    rng: random.Random | None = None,
    limits: SearchLimits | None = None,
) -> Move | None:
    """Pick a move for *color* without touching *board*.

    Returns ``None`` when *color* has no legal move. The result must still
    go through the game state's ``make_move`` like any other move.
    """
    position = Position(board.copy(), color, castling, en_passant)
    engine = create_engine(difficulty, rng=rng, limits=limits)
    return engine.search(position).best_move
