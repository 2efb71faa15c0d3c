"""Qt bridge to run move selection in a worker thread."""

from __future__ import annotations

import logging
import random
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from varchess.core.board import Board
from varchess.core.enums import Color
from varchess.engine.policy import MoveSelector
from varchess.engine.search import Difficulty

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes automated moves on demand."""

    move_ready = pyqtSignal(int, object)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_selector", "_difficulty")

    def __init__(
        self,
        *,
        difficulty: Difficulty = Difficulty.HARD,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        self._selector = MoveSelector(random.Random(seed))
        self._difficulty = difficulty
        self._cancel_event = threading.Event()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @pyqtSlot(object, object, int)
    def request_move(self, board_obj: object, side_obj: object, request_id: int) -> None:
        """Select a move for *side_obj* on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board) or not isinstance(side_obj, Color):
            self.search_error.emit(request_id, "Engine received invalid board or side")
            return

        self._cancel_event.clear()
        try:
            move = self._selector.select_move(
                board_obj,
                side_obj,
                self._difficulty,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            _LOGGER.exception("Move selection failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if move is None:
            self.search_no_move.emit(request_id)
            return

        self.move_ready.emit(request_id, move)

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current search."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_difficulty(self, difficulty: int) -> None:
        """Update the difficulty (takes effect on the next request)."""
        self._difficulty = Difficulty(difficulty)
