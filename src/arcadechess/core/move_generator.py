"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arcadechess.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
    pawn_direction,
)
from arcadechess.core.board import Board
from arcadechess.core.enums import CastlingRights, Color, MoveFlag, PieceType
from arcadechess.core.move import Move
from arcadechess.core.types import Square, is_on_board

if TYPE_CHECKING:
    from arcadechess.core.position import Position


_CASTLING_RIGHTS: dict[tuple[Color, MoveFlag], CastlingRights] = {
    (Color.WHITE, MoveFlag.CASTLE_KINGSIDE): CastlingRights.WHITE_KINGSIDE,
    (Color.WHITE, MoveFlag.CASTLE_QUEENSIDE): CastlingRights.WHITE_QUEENSIDE,
    (Color.BLACK, MoveFlag.CASTLE_KINGSIDE): CastlingRights.BLACK_KINGSIDE,
    (Color.BLACK, MoveFlag.CASTLE_QUEENSIDE): CastlingRights.BLACK_QUEENSIDE,
}

# (flag, rook column, columns that must be empty, king path incl. start)
_CASTLING_SIDES: tuple[tuple[MoveFlag, int, tuple[int, ...], tuple[int, ...]], ...] = (
    (MoveFlag.CASTLE_KINGSIDE, 7, (5, 6), (4, 5, 6)),
    (MoveFlag.CASTLE_QUEENSIDE, 0, (1, 2, 3), (4, 3, 2)),
)


def home_row(color: Color) -> int:
    """Back-rank row of *color*."""
    return 7 if color == Color.WHITE else 0


# -- Public API -------------------------------------------------------------


def pseudo_legal_moves(
    board: Board,
    sq: Square,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: Square | None = None,
) -> list[Move]:
    """Moves of the piece on *sq* that follow its movement pattern.

    Ignores whether the mover's own king is left in check. Empty if *sq*
    is empty.
    """
    piece = board[sq]
    if piece is None:
        return []

    moves: list[Move] = []
    color = piece.color
    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        _gen_pawn(board, sq, color, en_passant, moves)
    elif ptype == PieceType.KNIGHT:
        _gen_steps(board, sq, color, KNIGHT_TARGETS[sq], moves)
    elif ptype == PieceType.BISHOP:
        _gen_sliding(board, sq, color, BISHOP_RAYS[sq], moves)
    elif ptype == PieceType.ROOK:
        _gen_sliding(board, sq, color, ROOK_RAYS[sq], moves)
    elif ptype == PieceType.QUEEN:
        _gen_sliding(board, sq, color, QUEEN_RAYS[sq], moves)
    else:
        _gen_steps(board, sq, color, KING_TARGETS[sq], moves)
        _gen_castling(board, sq, color, castling, moves)
    return moves


def legal_moves(
    board: Board,
    sq: Square,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: Square | None = None,
) -> list[Move]:
    """Pseudo-legal moves of *sq* that do not leave the mover in check."""
    piece = board[sq]
    if piece is None:
        return []

    legal: list[Move] = []
    for move in pseudo_legal_moves(board, sq, castling, en_passant):
        scratch = board.copy()
        scratch.apply(move)
        if not is_in_check(scratch, piece.color):
            legal.append(move)
    return legal


def all_legal_moves(
    board: Board,
    color: Color,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: Square | None = None,
) -> list[Move]:
    """Every legal move of *color*, scanning the board row by row.

    An empty result means checkmate (if in check) or stalemate.
    """
    moves: list[Move] = []
    for sq, _ in board.pieces(color):
        moves.extend(legal_moves(board, sq, castling, en_passant))
    return moves


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Never mutates the position; legality is tested on board copies.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        pos = self._pos
        return all_legal_moves(pos.board, pos.side_to_move, pos.castling, pos.en_passant)

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq* (any color)."""
        pos = self._pos
        return legal_moves(pos.board, sq, pos.castling, pos.en_passant)


# -- Piece-specific generators (private) -----------------------------------


def _gen_pawn(
    board: Board,
    sq: Square,
    color: Color,
    en_passant: Square | None,
    moves: list[Move],
) -> None:
    direction = pawn_direction(color)
    start_row = 6 if color == Color.WHITE else 1
    last_row = 0 if color == Color.WHITE else 7
    row, col = sq

    one_row = row + direction
    if not is_on_board(one_row, col):
        return

    one_step = Square(one_row, col)
    if board.is_empty(one_step):
        _add_pawn_move(sq, one_step, last_row, moves)
        if row == start_row:
            two_step = Square(row + 2 * direction, col)
            if board.is_empty(two_step):
                moves.append(Move(sq, two_step))

    for cap_col in (col - 1, col + 1):
        if not is_on_board(one_row, cap_col):
            continue
        cap_sq = Square(one_row, cap_col)
        target = board[cap_sq]
        if target is not None:
            if target.color != color:
                _add_pawn_move(sq, cap_sq, last_row, moves)
        elif cap_sq == en_passant:
            victim = board[Square(row, cap_col)]
            if (
                victim is not None
                and victim.color != color
                and victim.piece_type == PieceType.PAWN
            ):
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))


def _add_pawn_move(
    from_sq: Square, to_sq: Square, last_row: int, moves: list[Move]
) -> None:
    if to_sq.row == last_row:
        moves.append(Move(from_sq, to_sq, MoveFlag.PROMOTION, PieceType.QUEEN))
    else:
        moves.append(Move(from_sq, to_sq))


def _gen_steps(
    board: Board,
    sq: Square,
    color: Color,
    targets: tuple[Square, ...],
    moves: list[Move],
) -> None:
    for to_sq in targets:
        target = board[to_sq]
        if target is None or target.color != color:
            moves.append(Move(sq, to_sq))


def _gen_sliding(
    board: Board,
    sq: Square,
    color: Color,
    rays: tuple[tuple[Square, ...], ...],
    moves: list[Move],
) -> None:
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
                continue
            if target.color != color:
                moves.append(Move(sq, to_sq))
            break


def _gen_castling(
    board: Board,
    king_sq: Square,
    color: Color,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    row = home_row(color)
    if king_sq != Square(row, 4) or not castling:
        return

    opponent = color.opposite
    for flag, rook_col, between, king_path in _CASTLING_SIDES:
        if not castling & _CASTLING_RIGHTS[(color, flag)]:
            continue
        rook = board[Square(row, rook_col)]
        if rook is None or rook.color != color or rook.piece_type != PieceType.ROOK:
            continue
        if any(not board.is_empty(Square(row, c)) for c in between):
            continue
        # Out of, through, or into check.
        if any(is_square_attacked(board, Square(row, c), opponent) for c in king_path):
            continue
        moves.append(Move(king_sq, Square(row, king_path[-1]), flag))
