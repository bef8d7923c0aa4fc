"""Fixed-depth minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging

from arcadechess.core.attacks import is_in_check
from arcadechess.core.board import Board
from arcadechess.core.enums import CastlingRights, Color
from arcadechess.core.evaluation import evaluate
from arcadechess.core.move import Move
from arcadechess.core.move_generator import all_legal_moves
from arcadechess.core.position import Position
from arcadechess.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
MATE_SCORE = 100_000


class MinimaxEngine(IEngine):
    """White maximizes, Black minimizes, matching the sign of :func:`evaluate`.

    Every root move is scored by a full-window minimax of ``max_depth``
    plies on its own board copy. Below the root, en passant is never
    available and the root's castling rights are reused unchanged.
    Children are searched on fresh copies, so nothing needs undoing and
    no two branches share a board.
    """

    __slots__ = ("_limits",)

    def __init__(self, limits: SearchLimits | None = None) -> None:
        self._limits = limits or SearchLimits()

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    def search(self, position: Position) -> SearchResult:
        depth = self._limits.max_depth
        if depth < 0:
            raise ValueError("Search depth must be >= 0")

        color = position.side_to_move
        castling = position.castling
        root_moves = all_legal_moves(
            position.board, color, castling, position.en_passant
        )
        if not root_moves:
            return SearchResult(None, 0, 0, 1)

        maximizing = color == Color.WHITE
        best_move: Move | None = None
        best_score = -_INF_SCORE if maximizing else _INF_SCORE
        nodes = 1

        for move in root_moves:
            child = position.board.copy()
            child.apply(move)
            score, child_nodes = self._minimax(
                child, depth, -_INF_SCORE, _INF_SCORE, not maximizing, castling
            )
            nodes += child_nodes
            # Strict comparison: the first of equally good moves wins.
            if (maximizing and score > best_score) or (
                not maximizing and score < best_score
            ):
                best_score = score
                best_move = move

        _LOGGER.debug(
            "minimax picked %s for %s (score=%d, depth=%d, nodes=%d)",
            best_move,
            color,
            best_score,
            depth,
            nodes,
        )
        return SearchResult(best_move, best_score, depth, nodes)

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
        castling: CastlingRights,
    ) -> tuple[int, int]:
        """Return ``(score, nodes)`` for *board* with *depth* plies left."""
        if depth == 0:
            return evaluate(board), 1

        color = Color.WHITE if maximizing else Color.BLACK
        moves = all_legal_moves(board, color, castling, None)
        if not moves:
            if is_in_check(board, color):
                mate = MATE_SCORE - depth
                return (-mate if maximizing else mate), 1
            return 0, 1

        nodes = 1
        best = -_INF_SCORE if maximizing else _INF_SCORE
        for move in moves:
            child = board.copy()
            child.apply(move)
            score, child_nodes = self._minimax(
                child, depth - 1, alpha, beta, not maximizing, castling
            )
            nodes += child_nodes
            if maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)
            if beta <= alpha:
                break
        return best, nodes
