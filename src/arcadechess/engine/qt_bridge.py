"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from arcadechess.core.enums import Difficulty
from arcadechess.core.position import Position
from arcadechess.engine.factory import create_engine
from arcadechess.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes AI moves on demand.

    Move it to a ``QThread`` and connect ``request_move`` to a queued
    signal; results come back through the signals below. Each request runs
    to completion on a private copy of the position.
    """

    best_move_ready = pyqtSignal(int, object)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_difficulty", "_limits")

    def __init__(
        self,
        *,
        difficulty: Difficulty = Difficulty.HARD,
        max_depth: int = 3,
    ) -> None:
        super().__init__()
        self._difficulty = Difficulty(difficulty)
        self._limits = SearchLimits(max_depth=max_depth)
        self._engine = create_engine(self._difficulty, limits=self._limits)

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Pick a move for the side to move in *position_obj* and emit it."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        try:
            result = self._engine.search(position_obj.copy())
        except Exception as exc:
            _LOGGER.exception("Engine search %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, result.best_move)

    @pyqtSlot(str)
    def set_difficulty(self, difficulty: str) -> None:
        """Switch policy (takes effect on the next request)."""
        self._difficulty = Difficulty(difficulty)
        self._engine = create_engine(self._difficulty, limits=self._limits)
