"""Game management layer: configuration, controller and state machine.

Quick start::

    from chessette.game import GameConfig, GameController

    ctrl = GameController()
    if ctrl.new_game(GameConfig.preset(5, pieces_per_side=2)):
        print(ctrl.legal_moves("B2"))
"""

from chessette.game.config import LOADOUTS, GameConfig
from chessette.game.controller import GameController, GameEvents
from chessette.game.interfaces import GamePhase, IGameController
from chessette.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "LOADOUTS",
    "GameConfig",
    "GameController",
    "GameEvents",
    "GameState",
]
