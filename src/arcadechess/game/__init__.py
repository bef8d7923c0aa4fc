"""Game management layer — state machine, players, controller.

Quick start::

    from arcadechess.game import GameController
    from arcadechess.settings import GameSettings

    ctrl = GameController.vs_computer(GameSettings(difficulty="hard"))
    ctrl.submit_move(parse_square("e2"), parse_square("e4"))
    ctrl.play_ai_turn()
"""

from arcadechess.game.controller import GameController, GameEvents
from arcadechess.game.interfaces import GamePhase, IPlayer
from arcadechess.game.player import AIPlayer, HumanPlayer
from arcadechess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
