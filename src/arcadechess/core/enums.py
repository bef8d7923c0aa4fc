"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, StrEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    EN_PASSANT = 1
    CASTLE_KINGSIDE = 2
    CASTLE_QUEENSIDE = 3
    PROMOTION = 4


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class GameStatus(IntEnum):
    """Status of the side to move, recomputed after every move."""

    PLAYING = 0
    CHECK = 1
    WHITE_WINS = 2
    BLACK_WINS = 3
    STALEMATE = 4

    @classmethod
    def checkmate(cls, winner: Color) -> GameStatus:
        return cls.WHITE_WINS if winner == Color.WHITE else cls.BLACK_WINS

    @property
    def is_checkmate(self) -> bool:
        return self in (GameStatus.WHITE_WINS, GameStatus.BLACK_WINS)

    @property
    def is_terminal(self) -> bool:
        return self.is_checkmate or self == GameStatus.STALEMATE

    @property
    def winner(self) -> Color | None:
        """Winning color for a checkmate, ``None`` otherwise."""
        if self == GameStatus.WHITE_WINS:
            return Color.WHITE
        if self == GameStatus.BLACK_WINS:
            return Color.BLACK
        return None


class Difficulty(StrEnum):
    """Computer opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
