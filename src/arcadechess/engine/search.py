"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from arcadechess.core.move import Move
    from arcadechess.core.position import Position


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    ``max_depth`` is the number of plies searched below each root move.
    """

    max_depth: int = 3


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine search.

    ``score`` is from White's point of view, like :func:`evaluate`.
    """

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for move pickers used by the game layer."""

    def search(self, position: Position) -> SearchResult: ...
