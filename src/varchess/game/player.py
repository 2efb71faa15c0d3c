"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from varchess.core.enums import Color
from varchess.engine.policy import MoveSelector
from varchess.engine.search import Difficulty
from varchess.game.interfaces import IPlayer

if TYPE_CHECKING:
    from varchess.core.board import Board
    from varchess.core.move import Move


class HumanPlayer(IPlayer):
    """A human participant — moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board, side: Color) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """An automated participant that delegates computation to a callback.

    ``AIPlayer`` only stores a reference to a *bridge* callable invoked on
    ``request_move``; with Qt this is an ``EngineSession`` that dispatches
    work to an ``EngineWorker`` running in a ``QThread``.

    Args:
        color: Side the AI plays.
        name: Display name.
        on_request_move: ``(Board, Color) -> None`` — called when the
            controller asks the AI to start thinking.
        on_cancel: ``() -> None`` — called to abort a running search.
    """

    __slots__ = ("_color", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        on_request_move: Callable[[Board, Color], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board, side: Color) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board, side)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()


class LocalAIPlayer(AIPlayer):
    """Automated player that selects synchronously on the calling thread.

    The chosen move is parked until :meth:`take_move` collects it, so the
    driver loop submits it to the controller without nesting calls.
    """

    __slots__ = ("_selector", "_difficulty", "_pending")

    def __init__(
        self,
        color: Color,
        difficulty: Difficulty = Difficulty.HARD,
        selector: MoveSelector | None = None,
        name: str = "",
    ) -> None:
        super().__init__(color, name or f"Engine ({difficulty})")
        self._selector = selector or MoveSelector()
        self._difficulty = difficulty
        self._pending: Move | None = None

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def request_move(self, board: Board, side: Color) -> None:
        self._pending = self._selector.select_move(board, side, self._difficulty)

    def take_move(self) -> Move | None:
        move, self._pending = self._pending, None
        return move

    def cancel(self) -> None:
        self._pending = None
