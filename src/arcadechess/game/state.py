"""Game state machine — authoritative position, status and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from arcadechess.core.enums import Color, GameStatus
from arcadechess.core.errors import IllegalMove
from arcadechess.core.move import Move
from arcadechess.core.move_generator import MoveGenerator
from arcadechess.core.piece import Piece
from arcadechess.core.position import Position
from arcadechess.core.rules import Rules
from arcadechess.core.types import Square
from arcadechess.game.interfaces import GamePhase


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history (display only)."""

    move: Move
    piece: Piece
    captured: Piece | None
    status_after: GameStatus

    @property
    def from_sq(self) -> Square:
        return self.move.from_sq

    @property
    def to_sq(self) -> Square:
        return self.move.to_sq

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        text = f"{self.piece.symbol} {self.move.from_sq}{sep}{self.move.to_sq}"
        if self.status_after.is_checkmate:
            return text + "#"
        if self.status_after == GameStatus.CHECK:
            return text + "+"
        return text


@dataclass
class GameState:
    """Owns the board, turn, castling rights, en-passant target and history.

    :meth:`apply_move` is the only mutator; everything else is a query.
    This is a pure data/logic class — no threading, no UI.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: GameStatus = field(default=GameStatus.PLAYING, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _captured: dict[Color, list[Piece]] = field(
        default_factory=lambda: {Color.WHITE: [], Color.BLACK: []},
        init=False,
        repr=False,
    )

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None) -> None:
        """Initialise (or reset) the game, from the initial position by default."""
        self.position = position.copy() if position is not None else Position()
        self.move_history.clear()
        self._captured = {Color.WHITE: [], Color.BLACK: []}
        self.status = Rules.status(self.position)
        self.phase = (
            GamePhase.GAME_OVER if self.status.is_terminal else GamePhase.AWAITING_MOVE
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def turn(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def history(self) -> list[MoveRecord]:
        return list(self.move_history)

    def captured(self, color: Color) -> list[Piece]:
        """Pieces captured *by* *color*, in capture order."""
        return list(self._captured[color])

    def select(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq* if it belongs to the side to move."""
        piece = self.position.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return []
        return MoveGenerator(self.position).legal_moves_from(sq)

    def legal_moves_for(self, sq: Square) -> list[Square]:
        """Destination squares for highlighting."""
        return [move.to_sq for move in self.select(sq)]

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Validate an arbitrary ``(from, to)`` request and apply it.

        Raises :class:`IllegalMove` if *to_sq* is not a legal destination of
        the piece on *from_sq* for the side to move, or the game is over.
        """
        if self.is_game_over:
            raise IllegalMove(f"Game is over ({self.status.name})")
        for move in self.select(from_sq):
            if move.to_sq == to_sq:
                return self.apply_move(move)
        raise IllegalMove(f"{from_sq}{to_sq} is not legal for {self.side_to_move}")

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        mover = self.side_to_move
        piece = self.position.board[move.from_sq]
        if piece is None:
            raise IllegalMove(f"No piece on {move.from_sq}")

        captured = self.position.make_move(move)
        if captured is not None:
            self._captured[mover].append(captured)

        self.status = Rules.status(self.position)
        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            status_after=self.status,
        )
        self.move_history.append(record)
        if self.status.is_terminal:
            self.phase = GamePhase.GAME_OVER
        return record
