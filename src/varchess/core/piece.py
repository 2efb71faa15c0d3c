"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from varchess.core.enums import Color, PieceType

# Letter ↔ (Color, PieceType), uppercase = white
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    ``has_moved`` is recorded when a move commits but no movement rule reads
    it; it is reserved for future rule extensions and ignored by equality.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = field(default=False, compare=False)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        return _LETTERS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    # ── Rewrites ─────────────────────────────────────────────────────────

    def moved(self) -> Piece:
        return replace(self, has_moved=True)

    def promoted(self) -> Piece:
        """The queen a pawn turns into on the far rank."""
        return replace(self, piece_type=PieceType.QUEEN)
