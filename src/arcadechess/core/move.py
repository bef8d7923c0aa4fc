"""Move value object (coordinate notation)."""

from __future__ import annotations

from dataclasses import dataclass

from arcadechess.core.enums import MoveFlag, PieceType
from arcadechess.core.types import Square, square_name

# Promotion always makes a queen.
_PROMO_CHARS: dict[PieceType, str] = {PieceType.QUEEN: "q"}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)
