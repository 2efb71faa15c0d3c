"""Shared engine search models, difficulty levels and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from varchess.core.board import Board
    from varchess.core.enums import Color
    from varchess.core.move import Move

CancelCheck = Callable[[], bool]

MATE_SCORE = 10_000

_DIFFICULTY_LABELS: dict[int, str] = {
    1: "Easy",
    2: "Medium",
    3: "Hard",
    4: "Very Hard",
}


class Difficulty(IntEnum):
    """Automated-play strength, weakest first."""

    EASY = 1
    MEDIUM = 2
    HARD = 3
    VERY_HARD = 4

    @property
    def label(self) -> str:
        return _DIFFICULTY_LABELS[self.value]

    @property
    def search_depth(self) -> int | None:
        """Minimax depth in plies, or None for the random policies."""
        if self == Difficulty.HARD:
            return 2
        if self == Difficulty.VERY_HARD:
            return 3
        return None

    @classmethod
    def from_label(cls, text: str) -> Difficulty:
        """Parse ``"Easy"``, ``"very-hard"``, ``"VERY_HARD"`` and the like."""
        key = text.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {text!r}") from None

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    depth: int = 2


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``score`` is white-centric: positive favours white.
    """

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the move selector."""

    def search(
        self,
        board: Board,
        side: Color,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...
