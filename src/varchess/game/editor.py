"""Position editor — placement rules for setting up a custom board."""

from __future__ import annotations

import logging

from varchess.config import DEFAULT_BOARD_SIZE, GameConfig, GameMode, validate_board_size
from varchess.core.board import Board
from varchess.core.check import is_in_check
from varchess.core.enums import Color, PieceType
from varchess.core.piece import Piece
from varchess.core.types import Square
from varchess.engine.search import Difficulty

_LOGGER = logging.getLogger(__name__)


class PlacementError(ValueError):
    """Raised when an edit would produce an unplayable position."""


class BoardEditor:
    """Builds a starting position on top of :meth:`Board.initial`.

    Kings are fixed: they cannot be overwritten, removed or added. Any other
    piece may be dropped on any square as long as it does not give check to
    the opposing king.
    """

    __slots__ = ("_board",)

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        self._board = Board.initial(validate_board_size(size))

    @property
    def board(self) -> Board:
        """A copy of the position being edited."""
        return self._board.copy()

    @property
    def size(self) -> int:
        return self._board.size

    def resize(self, size: int) -> None:
        """Switch to a fresh kings-only board of *size*."""
        self._board = Board.initial(validate_board_size(size))

    def reset(self) -> None:
        self._board = Board.initial(self._board.size)

    def place(self, sq: Square, piece: Piece) -> None:
        if not self._board.in_bounds(sq):
            raise PlacementError(f"Square {sq} is off the {self.size}x{self.size} board")
        if piece.piece_type == PieceType.KING:
            raise PlacementError("Kings are placed automatically")
        existing = self._board[sq]
        if existing is not None and existing.piece_type == PieceType.KING:
            raise PlacementError("A king cannot be replaced")

        candidate = self._board.copy()
        candidate[sq] = piece
        opponent = piece.color.opposite
        if is_in_check(candidate, opponent):
            raise PlacementError(f"This piece would put the {opponent} king in check")

        self._board = candidate
        _LOGGER.debug("Placed %s on %s", piece, sq)

    def remove(self, sq: Square) -> None:
        existing = self._board.get(sq)
        if existing is None:
            return
        if existing.piece_type == PieceType.KING:
            raise PlacementError("A king cannot be removed")
        self._board[sq] = None

    def validate(self, side_to_move: Color = Color.WHITE) -> None:
        """Raise unless the position can start with *side_to_move* to play.

        The side that is not to move must not be in check.
        """
        waiting = side_to_move.opposite
        if is_in_check(self._board, waiting):
            raise PlacementError(f"The {waiting} king must not start in check")

    def to_config(
        self,
        mode: GameMode = GameMode.PVE,
        difficulty: Difficulty = Difficulty.HARD,
    ) -> GameConfig:
        """Validate the position and wrap it into a :class:`GameConfig`."""
        self.validate()
        return GameConfig(
            mode=mode,
            difficulty=difficulty,
            board_size=self.size,
            initial_board=self.board,
        )
