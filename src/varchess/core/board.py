"""Board - piece placement on an N x N grid."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from varchess.core.enums import Color, PieceType
from varchess.core.piece import Piece
from varchess.core.types import BOARD_SIZE_MAX, BOARD_SIZE_MIN, Square, in_bounds

if TYPE_CHECKING:
    from varchess.core.move import Move


class Board:
    """Mutable square grid of optional pieces.

    Rule functions only read boards; hypothetical moves are always played on
    a :meth:`copy` (or through :meth:`with_move`).
    """

    __slots__ = ("_size", "_squares")

    def __init__(self, size: int) -> None:
        if not BOARD_SIZE_MIN <= size <= BOARD_SIZE_MAX:
            raise ValueError(
                f"Board size must be in [{BOARD_SIZE_MIN}, {BOARD_SIZE_MAX}], got {size}"
            )
        self._size = size
        self._squares: list[list[Piece | None]] = [[None] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._squares[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._squares[row][col] = piece

    def get(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or None when empty or off the board."""
        if not in_bounds(sq, self._size):
            return None
        return self[sq]

    def in_bounds(self, sq: Square) -> bool:
        return in_bounds(sq, self._size)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[Square]:
        """All squares in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield (row, col)

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs for every occupied square, row-major."""
        for row, rank in enumerate(self._squares):
            for col, piece in enumerate(rank):
                if piece is not None:
                    yield (row, col), piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return sum(
            1
            for _, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        )

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or None if it is missing."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._size = self._size
        b._squares = [rank.copy() for rank in self._squares]
        return b

    def clear(self) -> None:
        self._squares = [[None] * self._size for _ in range(self._size)]

    def move_piece(self, move: Move, *, promote: bool = False) -> None:
        """Relocate the piece on ``move.from_sq`` in place.

        With *promote* the move is committed: the piece is marked as moved and
        a pawn landing on the far rank becomes a queen. Without it the piece
        is transplanted untouched, which is how hypothetical lines are played.
        """
        piece = self[move.from_sq]
        if piece is None:
            return
        if promote:
            piece = piece.moved()
            if self.is_promotion_square(piece, move.to_sq):
                piece = piece.promoted()
        self[move.to_sq] = piece
        self[move.from_sq] = None

    def with_move(self, move: Move, *, promote: bool = False) -> Board:
        """New board with *move* applied; ``self`` is left untouched."""
        board = self.copy()
        board.move_piece(move, promote=promote)
        return board

    def is_promotion_square(self, piece: Piece, sq: Square) -> bool:
        if piece.piece_type != PieceType.PAWN:
            return False
        far_row = 0 if piece.color == Color.WHITE else self._size - 1
        return sq[0] == far_row

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, size: int) -> Board:
        """Empty board with one king per side on the middle column.

        Black's king sits on row 0 and white's on the last row.
        """
        b = cls(size)
        mid = size // 2
        b[(0, mid)] = Piece(Color.BLACK, PieceType.KING)
        b[(size - 1, mid)] = Piece(Color.WHITE, PieceType.KING)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, rank in enumerate(self._squares):
            cells = [str(p) if p else "." for p in rank]
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  " + " ".join(str(col) for col in range(self._size)))
        return "\n".join(rows)


def create_initial_board(size: int) -> Board:
    """Boundary factory: kings only, see :meth:`Board.initial`."""
    return Board.initial(size)
