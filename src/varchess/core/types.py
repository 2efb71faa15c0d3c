"""Square type alias, board size bounds and coordinate helpers.

Board layout (row-major, row 0 at the top):
    row 0            black's back rank
    row size - 1     white's back rank

A square is a plain ``(row, col)`` pair, compared by value.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

BOARD_SIZE_MIN = 5
BOARD_SIZE_MAX = 10


def in_bounds(sq: Square, size: int) -> bool:
    """Whether *sq* lies on a ``size`` x ``size`` board."""
    row, col = sq
    return 0 <= row < size and 0 <= col < size


def sign(value: int) -> int:
    """-1, 0 or 1 according to the sign of *value*."""
    return (value > 0) - (value < 0)
