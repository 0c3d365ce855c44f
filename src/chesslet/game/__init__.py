"""Game management layer: controller and settings.

Quick start::

    from chesslet.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.select(6, 4)    # pick up the e2 pawn
    ctrl.release(4, 4)   # drop it on e4 -> MoveAction.MOVE
"""

from chesslet.game.controller import GameController, GameEvents
from chesslet.game.interfaces import GamePhase, IGameController
from chesslet.game.settings import GameSettings

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
]
