"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from arcadechess.core.enums import Color, MoveFlag, PieceType
from arcadechess.core.errors import NoKingFound
from arcadechess.core.move import Move
from arcadechess.core.piece import Piece
from arcadechess.core.types import Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, row 0 = black's back rank."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq[0]][sq[1]] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq[0]][sq[1]] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every piece of *color*, row-major."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None and piece.color == color:
                    yield Square(row, col), piece

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, row-major."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        raise NoKingFound(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def apply(self, move: Move) -> Piece | None:
        """Relocate pieces for *move* in place and return the captured piece.

        Handles en-passant removal, the castling rook and auto-promotion to a
        queen. Castling rights and turn order live in :class:`Position`.
        """
        grid = self._grid
        fr, fc = move.from_sq
        tr, tc = move.to_sq
        piece = grid[fr][fc]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = grid[tr][tc]
        if move.flag == MoveFlag.EN_PASSANT:
            # The captured pawn sits beside the mover, not on the target.
            captured = grid[fr][tc]
            grid[fr][tc] = None
        elif move.flag == MoveFlag.CASTLE_KINGSIDE:
            grid[fr][5] = grid[fr][7]
            grid[fr][7] = None
        elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
            grid[fr][3] = grid[fr][0]
            grid[fr][0] = None

        grid[tr][tc] = piece
        grid[fr][fc] = None

        if piece.piece_type == PieceType.PAWN and tr in (0, 7):
            grid[tr][tc] = Piece(piece.color, PieceType.QUEEN)
        return captured

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b._grid[0][col] = Piece(Color.BLACK, pt)
            b._grid[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            b._grid[6][col] = Piece(Color.WHITE, PieceType.PAWN)
            b._grid[7][col] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from 8 rows of 8 characters, black's back rank first.

        Pieces use letters (``K`` white king, ``k`` black king, ...), empty
        squares ``.``; spaces are ignored::

            Board.from_rows([
                "....k...",
                "........",
                ...
                "....K...",
            ])
        """
        cleaned = [row.replace(" ", "") for row in rows]
        if len(cleaned) != 8 or any(len(row) != 8 for row in cleaned):
            raise ValueError("Board diagram must have 8 rows of 8 squares")
        b = cls()
        for row, text in enumerate(cleaned):
            for col, char in enumerate(text):
                if char != ".":
                    b._grid[row][col] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{8 - row} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
