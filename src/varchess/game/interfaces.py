"""Abstract interfaces for the game layer.

The turn controller depends on these ABCs, not on concrete player classes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from varchess.core.enums import Color

if TYPE_CHECKING:
    from varchess.core.board import Board
    from varchess.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # automated side is computing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or automated)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board, side: Color) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For the automated side this kicks off move selection.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (automated only)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""
