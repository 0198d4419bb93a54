"""Game management layer: controller, players, state machine.

Quick start::

    from checkie.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.player import AIPlayer, HumanPlayer
from checkie.game.state import GameState, TurnRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "TurnRecord",
]
