"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Outcome of a game, derived from the board and the side to move."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    STALEMATE = 3

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @classmethod
    def checkmate_for(cls, loser: Color) -> GameResult:
        """Result when *loser* is checkmated."""
        return cls.BLACK_WINS if loser == Color.WHITE else cls.WHITE_WINS
