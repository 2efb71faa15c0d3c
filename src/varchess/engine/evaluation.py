"""Static material evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varchess.core.enums import Color, PieceType

if TYPE_CHECKING:
    from varchess.core.board import Board

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 900,
}


def evaluate(board: Board) -> int:
    """Material balance, positive when white is ahead.

    Only piece values count: no position, mobility or king-safety terms.
    """
    score = 0
    for _, piece in board.occupied():
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == Color.WHITE else -value
    return score
