"""Chess engine package: difficulty policies, search and Qt worker bridge."""

from arcadechess.engine.factory import ai_move, create_engine
from arcadechess.engine.heuristics import GreedyEngine, RandomEngine
from arcadechess.engine.minimax import MATE_SCORE, MinimaxEngine
from arcadechess.engine.search import IEngine, SearchLimits, SearchResult

__all__ = [
    "GreedyEngine",
    "IEngine",
    "MATE_SCORE",
    "MinimaxEngine",
    "RandomEngine",
    "SearchLimits",
    "SearchResult",
    "ai_move",
    "create_engine",
]
