"""Plain-text board layouts.

A layout lists rows from row 0 (black's side) downwards, one character per
square: a piece letter (uppercase = white) or ``.`` for an empty square.
Rows are separated by newlines or ``/``; spaces are ignored, so both
``"..k../...../..K.."`` and an indented multi-line string parse the same.
"""

from __future__ import annotations

from varchess.core.board import Board
from varchess.core.piece import Piece

EMPTY_CHAR = "."


def board_from_text(text: str) -> Board:
    """Parse a layout into a :class:`Board` whose size is the row count."""
    rows = [
        row.replace(" ", "")
        for line in text.strip().splitlines()
        for row in line.strip().split("/")
        if row.strip()
    ]
    size = len(rows)
    board = Board(size)
    for row_idx, row_text in enumerate(rows):
        if len(row_text) != size:
            raise ValueError(
                f"Invalid layout row width {len(row_text)} (expected {size}): {row_text!r}"
            )
        for col_idx, ch in enumerate(row_text):
            if ch != EMPTY_CHAR:
                board[(row_idx, col_idx)] = Piece.from_char(ch)
    return board


def board_to_text(board: Board, separator: str = "\n") -> str:
    """Serialise *board* into a layout readable by :func:`board_from_text`."""
    rows: list[str] = []
    for row in range(board.size):
        cells = [board[(row, col)] for col in range(board.size)]
        rows.append("".join(str(p) if p else EMPTY_CHAR for p in cells))
    return separator.join(rows)
