"""Variable-size chess rules engine with a difficulty-driven search bot.

The boundary used by front ends::

    from varchess import (
        create_initial_board,
        is_in_check,
        is_legal_move,
        select_automated_move,
    )
"""

from varchess.core import (
    Board,
    Color,
    GameResult,
    Move,
    Piece,
    PieceType,
    create_initial_board,
    is_in_check,
    is_legal_move,
)
from varchess.engine import Difficulty, select_automated_move

__all__ = [
    "Board",
    "Color",
    "Difficulty",
    "GameResult",
    "Move",
    "Piece",
    "PieceType",
    "create_initial_board",
    "is_in_check",
    "is_legal_move",
    "select_automated_move",
]
