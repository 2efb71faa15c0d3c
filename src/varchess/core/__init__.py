"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from varchess.core import Color, MoveGenerator, create_initial_board

    board = create_initial_board(6)
    for move in MoveGenerator(board, Color.WHITE).generate_legal_moves():
        print(move)
"""

from varchess.core.board import Board, create_initial_board
from varchess.core.check import find_king, is_in_check, is_square_attacked
from varchess.core.enums import Color, GameResult, PieceType
from varchess.core.move import Move
from varchess.core.move_generator import MoveGenerator, all_legal_moves, is_legal_move
from varchess.core.movement import is_legal_geometry, is_path_clear
from varchess.core.notation import board_from_text, board_to_text
from varchess.core.piece import Piece
from varchess.core.rules import Rules
from varchess.core.types import (
    BOARD_SIZE_MAX,
    BOARD_SIZE_MIN,
    Square,
    in_bounds,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE_MAX",
    "BOARD_SIZE_MIN",
    "Square",
    "in_bounds",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Rule queries
    "all_legal_moves",
    "create_initial_board",
    "find_king",
    "is_in_check",
    "is_legal_geometry",
    "is_legal_move",
    "is_path_clear",
    "is_square_attacked",
    # Notation
    "board_from_text",
    "board_to_text",
]
