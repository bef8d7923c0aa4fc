"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from arcadechess.core import Position, MoveGenerator, Rules

    pos = Position()
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from arcadechess.core.attacks import is_in_check, is_square_attacked
from arcadechess.core.board import Board
from arcadechess.core.enums import (
    CastlingRights,
    Color,
    Difficulty,
    GameStatus,
    MoveFlag,
    PieceType,
)
from arcadechess.core.errors import ChessError, IllegalMove, NoKingFound
from arcadechess.core.evaluation import PIECE_VALUES, evaluate
from arcadechess.core.move import Move
from arcadechess.core.move_generator import (
    MoveGenerator,
    all_legal_moves,
    legal_moves,
    pseudo_legal_moves,
)
from arcadechess.core.piece import Piece
from arcadechess.core.position import Position
from arcadechess.core.rules import Rules
from arcadechess.core.types import Square, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "Difficulty",
    "GameStatus",
    "MoveFlag",
    "PieceType",
    # Errors
    "ChessError",
    "IllegalMove",
    "NoKingFound",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Rules functions
    "all_legal_moves",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    # Evaluation
    "PIECE_VALUES",
    "evaluate",
]
