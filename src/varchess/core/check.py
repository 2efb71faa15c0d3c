"""King location and attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varchess.core.enums import Color
from varchess.core.movement import is_legal_geometry
from varchess.core.types import Square

if TYPE_CHECKING:
    from varchess.core.board import Board


def find_king(board: Board, color: Color) -> Square | None:
    """Square of *color*'s king, scanning row-major; None if absent."""
    return board.king_square(color)


def is_square_attacked(board: Board, sq: Square, by: Color) -> bool:
    """Whether any piece of *by* could legally land on *sq*.

    Attack is judged through the regular movement geometry, so pawns only
    attack diagonally and sliders respect blockers.
    """
    for from_sq in board.pieces(by):
        if is_legal_geometry(board, from_sq, sq, by):
            return True
    return False


def is_in_check(board: Board, side: Color) -> bool:
    """Whether *side*'s king is attacked. A board without that king is never in check."""
    king_sq = find_king(board, side)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, side.opposite)
