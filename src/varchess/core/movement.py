"""Per-piece movement geometry and sliding-path obstruction.

These are pure queries over a board snapshot: a malformed request (empty or
foreign origin, off-board squares, friendly target) answers False rather
than raising, because editors probe speculative placements through them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from varchess.core.enums import Color, PieceType
from varchess.core.types import Square, sign

if TYPE_CHECKING:
    from varchess.core.board import Board
    from varchess.core.piece import Piece


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between the two endpoints is empty.

    Walks one step at a time along sign(Δrow), sign(Δcol); only meaningful
    for orthogonal or diagonal lines.
    """
    d_row = sign(to_sq[0] - from_sq[0])
    d_col = sign(to_sq[1] - from_sq[1])
    row = from_sq[0] + d_row
    col = from_sq[1] + d_col
    while (row, col) != to_sq:
        if board[(row, col)] is not None:
            return False
        row += d_row
        col += d_col
    return True


def is_legal_geometry(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    side: Color,
) -> bool:
    """Whether the piece of *side* on *from_sq* may travel to *to_sq*.

    Covers movement shape, path obstruction and capture consistency. It does
    not look at whether the mover's own king ends up in check.
    """
    if not board.in_bounds(from_sq) or not board.in_bounds(to_sq):
        return False
    piece = board[from_sq]
    if piece is None or piece.color != side:
        return False
    target = board[to_sq]
    if target is not None and target.color == side:
        return False

    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]
    abs_row = abs(d_row)
    abs_col = abs(d_col)
    ptype = piece.piece_type

    if ptype == PieceType.PAWN:
        return _pawn_geometry(board, piece, from_sq, to_sq, d_row, d_col, target)
    if ptype == PieceType.ROOK:
        if d_row != 0 and d_col != 0:
            return False
        return is_path_clear(board, from_sq, to_sq)
    if ptype == PieceType.BISHOP:
        if abs_row != abs_col:
            return False
        return is_path_clear(board, from_sq, to_sq)
    if ptype == PieceType.QUEEN:
        if d_row != 0 and d_col != 0 and abs_row != abs_col:
            return False
        return is_path_clear(board, from_sq, to_sq)
    if ptype == PieceType.KNIGHT:
        return (abs_row, abs_col) in ((2, 1), (1, 2))
    if ptype == PieceType.KING:
        return abs_row <= 1 and abs_col <= 1
    return False


def pawn_direction(color: Color) -> int:
    """Row step of a forward pawn move."""
    return -1 if color == Color.WHITE else 1


def pawn_home_row(color: Color, size: int) -> int:
    """Row from which a pawn of *color* may advance two squares."""
    return size - 2 if color == Color.WHITE else 1


def _pawn_geometry(
    board: Board,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    d_row: int,
    d_col: int,
    target: Piece | None,
) -> bool:
    direction = pawn_direction(piece.color)

    if d_col == 0 and d_row == direction:
        return target is None

    # Diagonal steps only ever capture.
    if abs(d_col) == 1 and d_row == direction:
        return target is not None and target.color != piece.color

    if d_col == 0 and d_row == 2 * direction:
        if from_sq[0] != pawn_home_row(piece.color, board.size):
            return False
        between = (from_sq[0] + direction, from_sq[1])
        return target is None and board[between] is None

    return False
