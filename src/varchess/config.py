"""Game and engine configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from varchess.core.board import Board
from varchess.core.enums import Color
from varchess.core.types import BOARD_SIZE_MAX, BOARD_SIZE_MIN
from varchess.engine.search import Difficulty

DEFAULT_BOARD_SIZE = 8


class GameMode(IntEnum):
    """Who sits at the board."""

    PVP = 1  # two humans
    PVE = 2  # human against the automated side


def validate_board_size(size: int) -> int:
    """Return *size* unchanged, or raise ``ValueError`` if it is unsupported."""
    if not BOARD_SIZE_MIN <= size <= BOARD_SIZE_MAX:
        raise ValueError(
            f"Board size must be in [{BOARD_SIZE_MIN}, {BOARD_SIZE_MAX}], got {size}"
        )
    return size


@dataclass
class EngineSettings:
    """Automated-play settings."""

    difficulty: Difficulty = Difficulty.HARD
    # Pause before the automated side starts thinking.
    move_delay_ms: int = 600
    seed: int | None = None


@dataclass
class GameConfig:
    """Everything needed to start a game from the setup screen."""

    mode: GameMode = GameMode.PVE
    difficulty: Difficulty = Difficulty.HARD
    board_size: int = DEFAULT_BOARD_SIZE
    initial_board: Board | None = field(default=None, compare=False)
    ai_color: Color = Color.BLACK

    def __post_init__(self) -> None:
        validate_board_size(self.board_size)
        if self.initial_board is not None and self.initial_board.size != self.board_size:
            raise ValueError(
                f"Initial board is {self.initial_board.size}x{self.initial_board.size}, "
                f"expected {self.board_size}x{self.board_size}"
            )

    def starting_board(self) -> Board:
        """A fresh copy of the configured starting board."""
        if self.initial_board is None:
            return Board.initial(self.board_size)
        return self.initial_board.copy()

    def engine_settings(self, **overrides: object) -> EngineSettings:
        settings = EngineSettings(difficulty=self.difficulty)
        for name, value in overrides.items():
            setattr(settings, name, value)
        return settings
