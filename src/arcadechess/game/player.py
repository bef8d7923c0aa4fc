"""Concrete player implementations."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable

from arcadechess.core.enums import Color, Difficulty
from arcadechess.engine.factory import create_engine
from arcadechess.engine.search import SearchLimits
from arcadechess.game.interfaces import IPlayer

if TYPE_CHECKING:
    from arcadechess.core.move import Move
    from arcadechess.core.position import Position


class HumanPlayer(IPlayer):
    """A human participant — moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, position: Position) -> None:
        pass  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """A computer participant playing at a fixed difficulty.

    :meth:`choose_move` runs the search synchronously. When
    ``on_request_move`` is given, :meth:`request_move` hands the position to
    it instead (e.g. to queue the search on an ``EngineWorker`` thread) and
    the result is expected back through ``GameController.apply_engine_move``.

    Args:
        color: Side the AI plays.
        difficulty: Engine policy.
        name: Display name.
        on_request_move: ``(Position) -> None`` — called when the game
            controller asks the AI to start thinking.
        rng: Random source for the easy and medium tiers.
        limits: Search limits for the hard tier.
    """

    __slots__ = ("_color", "_name", "_difficulty", "_engine", "_on_request_move")

    def __init__(
        self,
        color: Color,
        difficulty: Difficulty = Difficulty.MEDIUM,
        name: str = "",
        on_request_move: Callable[[Position], None] | None = None,
        rng: random.Random | None = None,
        limits: SearchLimits | None = None,
    ) -> None:
        self._color = color
        self._difficulty = Difficulty(difficulty)
        self._name = name or f"Computer ({self._difficulty})"
        self._engine = create_engine(self._difficulty, rng=rng, limits=limits)
        self._on_request_move = on_request_move

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def request_move(self, position: Position) -> None:
        if self._on_request_move is not None:
            self._on_request_move(position)

    def choose_move(self, position: Position) -> Move | None:
        """Search a private copy of *position*; ``None`` if no legal move."""
        return self._engine.search(position.copy()).best_move
