"""Attack detection: is a square attacked, is a king in check."""

from __future__ import annotations

from arcadechess.core.board import Board
from arcadechess.core.enums import Color, PieceType
from arcadechess.core.types import ALL_SQUARES, Square, is_on_board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


def pawn_direction(color: Color) -> int:
    """Row step of a forward pawn move: white moves toward row 0."""
    return -1 if color == Color.WHITE else 1


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        targets[sq] = tuple(
            Square(sq.row + dr, sq.col + dc)
            for dr, dc in offsets
            if is_on_board(sq.row + dr, sq.col + dc)
        )
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            r = sq.row + dr
            c = sq.col + dc
            ray: list[Square] = []
            while is_on_board(r, c):
                ray.append(Square(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    # A pawn attacking sq stands one row "behind" it from its own viewpoint.
    pawn_row = sq.row - pawn_direction(by_color)
    for pawn_col in (sq.col - 1, sq.col + 1):
        if is_on_board(pawn_row, pawn_col):
            piece = board[Square(pawn_row, pawn_col)]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.PAWN
            ):
                return True

    for from_sq in KNIGHT_TARGETS[sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for from_sq in KING_TARGETS[sq]:
        piece = board[from_sq]
        if (
            piece is not None
            and piece.color == by_color
            and piece.piece_type == PieceType.KING
        ):
            return True

    for ray in BISHOP_RAYS[sq]:
        for from_sq in ray:
            piece = board[from_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in _DIAGONAL_ATTACKERS:
                return True
            break

    for ray in ROOK_RAYS[sq]:
        for from_sq in ray:
            piece = board[from_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in _STRAIGHT_ATTACKERS:
                return True
            break

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    Raises :class:`~arcadechess.core.errors.NoKingFound` if *color* has no king.
    """
    king_sq = board.king_square(color)
    return is_square_attacked(board, king_sq, color.opposite)
