"""High-level chess rules: check, checkmate, stalemate, game status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arcadechess.core.attacks import is_in_check
from arcadechess.core.enums import GameStatus
from arcadechess.core.move_generator import all_legal_moves

if TYPE_CHECKING:
    from arcadechess.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy: the only drawn outcome is stalemate.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.board, position.side_to_move)

    @staticmethod
    def has_legal_moves(position: Position) -> bool:
        return bool(
            all_legal_moves(
                position.board,
                position.side_to_move,
                position.castling,
                position.en_passant,
            )
        )

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(position) and not Rules.has_legal_moves(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(position) and not Rules.has_legal_moves(position)

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Derive the status of the side to move."""
        in_check = Rules.is_in_check(position)
        if not Rules.has_legal_moves(position):
            if in_check:
                return GameStatus.checkmate(position.side_to_move.opposite)
            return GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.PLAYING
