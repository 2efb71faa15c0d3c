"""Chess engine package: evaluation, search, difficulty policy and Qt worker bridge."""

from varchess.engine.evaluation import PIECE_VALUES, evaluate
from varchess.engine.minimax_search import MinimaxSearchEngine
from varchess.engine.policy import MoveSelector, select_automated_move
from varchess.engine.qt_bridge import EngineWorker
from varchess.engine.search import (
    MATE_SCORE,
    CancelCheck,
    Difficulty,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "CancelCheck",
    "Difficulty",
    "EngineWorker",
    "IEngine",
    "MATE_SCORE",
    "MinimaxSearchEngine",
    "MoveSelector",
    "PIECE_VALUES",
    "SearchLimits",
    "SearchResult",
    "evaluate",
    "select_automated_move",
]
