"""Legal move generation with self-check exclusion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varchess.core.check import is_in_check
from varchess.core.enums import Color
from varchess.core.move import Move
from varchess.core.movement import is_legal_geometry
from varchess.core.types import Square

if TYPE_CHECKING:
    from varchess.core.board import Board


class MoveGenerator:
    """Generates legal moves for *side* on a :class:`Board`.

    Every candidate is tried on a cloned board, so the generator never
    mutates the board it was given. The scan visits every origin against
    every destination, which is quartic in the board size; it is the main
    cost of a search.
    """

    __slots__ = ("_board", "_side")

    def __init__(self, board: Board, side: Color) -> None:
        self._board = board
        self._side = side

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves, origins and destinations in row-major order."""
        legal: list[Move] = []
        append_legal = legal.append
        for from_sq in self._board.pieces(self._side):
            for to_sq in self._board.squares():
                if self._is_legal_from(from_sq, to_sq):
                    append_legal(Move(from_sq, to_sq))
        return legal

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Squares the piece on *from_sq* may legally move to."""
        if not self._board.in_bounds(from_sq):
            return []
        return [
            to_sq for to_sq in self._board.squares() if self._is_legal_from(from_sq, to_sq)
        ]

    def is_legal(self, move: Move) -> bool:
        return self._is_legal_from(move.from_sq, move.to_sq)

    def has_legal_moves(self) -> bool:
        for from_sq in self._board.pieces(self._side):
            for to_sq in self._board.squares():
                if self._is_legal_from(from_sq, to_sq):
                    return True
        return False

    def is_in_check(self) -> bool:
        return is_in_check(self._board, self._side)

    # -- Internal helpers ---------------------------------------------------

    def _is_legal_from(self, from_sq: Square, to_sq: Square) -> bool:
        if not is_legal_geometry(self._board, from_sq, to_sq, self._side):
            return False
        # Promotion is not applied to the hypothetical board.
        after = self._board.with_move(Move(from_sq, to_sq))
        return not is_in_check(after, self._side)


def all_legal_moves(board: Board, side: Color) -> list[Move]:
    return MoveGenerator(board, side).generate_legal_moves()


def is_legal_move(board: Board, from_sq: Square, to_sq: Square, side: Color) -> bool:
    """Geometry plus self-check exclusion for a single move."""
    return MoveGenerator(board, side).is_legal(Move(from_sq, to_sq))
