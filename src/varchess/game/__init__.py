"""Game management layer — turn controller, players, state machine, editor.

Quick start::

    from varchess.core import Color
    from varchess.engine import Difficulty
    from varchess.game import HumanPlayer, LocalAIPlayer, TurnController

    ctrl = TurnController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=LocalAIPlayer(Color.BLACK, Difficulty.MEDIUM),
    )
"""

from varchess.game.controller import GameEvents, TurnController, players_for
from varchess.game.editor import BoardEditor, PlacementError
from varchess.game.engine_session import EngineSession
from varchess.game.interfaces import GamePhase, IGameController, IPlayer
from varchess.game.player import AIPlayer, HumanPlayer, LocalAIPlayer
from varchess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "BoardEditor",
    "EngineSession",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "LocalAIPlayer",
    "MoveRecord",
    "PlacementError",
    "TurnController",
    "players_for",
]
