"""GameController — the central orchestrator of a chess game.

Coordinates: Players, GameState.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from arcadechess.core.enums import Color, GameStatus
from arcadechess.core.errors import IllegalMove
from arcadechess.core.move import Move
from arcadechess.core.position import Position
from arcadechess.core.types import Square
from arcadechess.game.interfaces import GamePhase, IPlayer
from arcadechess.game.player import AIPlayer, HumanPlayer
from arcadechess.game.state import GameState, MoveRecord
from arcadechess.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameStatus], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full chess game: validates moves, switches turns,
    prompts the AI, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). AI results computed elsewhere arrive via
    :meth:`apply_engine_move` on that thread.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    @classmethod
    def vs_computer(cls, settings: GameSettings | None = None) -> GameController:
        """Human against the computer; the computer plays ``settings.ai_color``."""
        settings = settings or GameSettings()
        ai = AIPlayer(
            settings.ai_color,
            settings.difficulty,
            rng=settings.make_rng(),
            limits=settings.search_limits,
        )
        human = HumanPlayer(settings.ai_color.opposite, "You")
        ctrl = cls()
        if ai.color == Color.BLACK:
            ctrl.new_game(white=human, black=ai)
        else:
            ctrl.new_game(white=ai, black=human)
        return ctrl

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    def legal_moves_for(self, sq: Square) -> list[Square]:
        """Destinations of the piece on *sq*; empty for the side not to move."""
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return []
        return self._state.legal_moves_for(sq)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        position: Position | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(position)

        if self._state.is_game_over:
            self._emit_game_over(self._state.status)
            return
        self._prompt_current_player()

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play ``from_sq -> to_sq`` for the human to move.

        Returns False (and changes nothing) when no human is waiting to move
        or the move is not legal.
        """
        cp = self.current_player
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False
        if cp is None or not cp.is_human:
            return False
        return self._try_move(from_sq, to_sq)

    def play_ai_turn(self) -> MoveRecord | None:
        """Let the AI to move pick and play its move synchronously.

        Returns None if the side to move is not an AI or the game is over.
        """
        cp = self.current_player
        if not isinstance(cp, AIPlayer) or self._state.is_game_over:
            return None

        move = cp.choose_move(self._state.position)
        if move is None:
            return None
        record = self._state.make_move(move.from_sq, move.to_sq)
        self._after_move(record)
        return record

    def apply_engine_move(self, move: Move) -> bool:
        """Accept a move computed off-thread (e.g. by ``EngineWorker``).

        Only valid while the AI to move is thinking; anything else is a
        stale or foreign result and is dropped.
        """
        if self._state.phase != GamePhase.THINKING or not isinstance(
            self.current_player, AIPlayer
        ):
            _LOGGER.debug(
                "Dropped engine move %s in phase %s", move, self._state.phase.name
            )
            return False
        return self._try_move(move.from_sq, move.to_sq)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _try_move(self, from_sq: Square, to_sq: Square) -> bool:
        try:
            record = self._state.make_move(from_sq, to_sq)
        except IllegalMove as exc:
            _LOGGER.debug("Rejected move: %s", exc)
            return False

        self._after_move(record)
        return True

    def _after_move(self, record: MoveRecord) -> None:
        self._emit_move(record)
        if self._state.is_game_over:
            self._emit_game_over(self._state.status)
            return
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.position.copy())

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, status: GameStatus) -> None:
        _LOGGER.info("Game over after %d plies: %s", self._state.ply_count, status.name)
        self._state.phase = GamePhase.GAME_OVER
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(status)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
