"""Position — board plus side to move, castling rights and en-passant target."""

from __future__ import annotations

from arcadechess.core.board import Board
from arcadechess.core.enums import CastlingRights, Color, PieceType
from arcadechess.core.move import Move
from arcadechess.core.piece import Piece
from arcadechess.core.types import Square


class Position:
    """Full rules state of a game at one moment.

    :meth:`make_move` mutates in place; searches work on :meth:`copy`.
    """

    __slots__ = ("board", "side_to_move", "castling", "en_passant")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant

    # ── Core move operation ──────────────────────────────────────────────

    def make_move(self, move: Move) -> Piece | None:
        """Apply *move* and return the captured piece, if any.

        Caller is responsible for the legality check.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = self.board.apply(move)
        self._update_castling(move, piece)

        # En passant target for the opponent, valid for one ply only.
        next_en_passant: Square | None = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_sq.row - move.from_sq.row) == 2
        ):
            next_en_passant = Square(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
            )
        self.en_passant = next_en_passant

        self.side_to_move = self.side_to_move.opposite
        return captured

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        Square(7, 0): CastlingRights.WHITE_QUEENSIDE,
        Square(7, 7): CastlingRights.WHITE_KINGSIDE,
        Square(0, 0): CastlingRights.BLACK_QUEENSIDE,
        Square(0, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        next_castling = self.castling
        if piece.piece_type == PieceType.KING:
            if piece.color == Color.WHITE:
                next_castling &= ~CastlingRights.WHITE_BOTH
            else:
                next_castling &= ~CastlingRights.BLACK_BOTH

        # A rook leaving its corner, or being captured on it.
        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                next_castling &= ~self._ROOK_CORNERS[sq]

        self.castling = next_castling

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
        )

    def __repr__(self) -> str:
        ep = self.en_passant if self.en_passant is not None else "-"
        return (
            f"Position({self.side_to_move} to move, "
            f"castling={self.castling!r}, en_passant={ep})\n{self.board!r}"
        )
