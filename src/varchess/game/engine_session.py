"""Automated-turn session: worker thread, pacing delay and move hand-off."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from PyQt6.QtCore import QObject, Qt, QThread, QTimer, pyqtSignal

from varchess.config import EngineSettings
from varchess.core.enums import Color
from varchess.core.move import Move
from varchess.engine.qt_bridge import EngineWorker
from varchess.engine.search import Difficulty
from varchess.game.controller import TurnController
from varchess.game.interfaces import GamePhase
from varchess.game.player import AIPlayer

if TYPE_CHECKING:
    from varchess.core.board import Board

_LOGGER = logging.getLogger(__name__)


class EngineRequestSignal(Protocol):
    """Minimal signal interface used by :class:`EngineSession`."""

    def connect(self, slot: Callable[..., object]) -> object: ...

    def emit(self, board_obj: object, side_obj: object, request_id: int) -> object: ...


class _EngineCommandBus(QObject):
    """Signal bridge for issuing worker commands across threads."""

    search_requested = pyqtSignal(object, object, int)
    cancel_requested = pyqtSignal()
    set_difficulty_requested = pyqtSignal(int)


class _SessionAIPlayer(AIPlayer):
    """Automated player whose name follows the session's current difficulty."""

    __slots__ = ("_settings",)

    def __init__(
        self,
        color: Color,
        settings: EngineSettings,
        on_request_move: Callable[[Board, Color], None],
        on_cancel: Callable[[], None],
    ) -> None:
        super().__init__(color, on_request_move=on_request_move, on_cancel=on_cancel)
        self._settings = settings

    @property
    def name(self) -> str:
        return f"Engine ({self._settings.difficulty})"


class EngineSession:
    """Owns the worker-thread lifecycle and hands chosen moves to the controller.

    A request is held back for ``settings.move_delay_ms`` before the worker
    starts, which paces the turn change. Results are matched against the
    request id and the board they were computed for, so stale answers are
    dropped.
    """

    _MAX_FAILURE_RETRIES = 1

    __slots__ = (
        "__weakref__",
        "_controller",
        "_engine_request",
        "_set_status",
        "_settings",
        "_command_bus",
        "_dispatch_timer",
        "_engine_thread",
        "_engine_worker",
        "_engine_request_id",
        "_pending_engine_request",
        "_pending_engine_board",
        "_pending_engine_side",
        "_remaining_failure_retries",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        controller: TurnController,
        settings: EngineSettings | None = None,
        engine_request: EngineRequestSignal | None = None,
        set_status: Callable[[str], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._controller = controller
        self._settings = settings or EngineSettings()
        self._set_status = set_status or (lambda _text: None)

        self._command_bus = _EngineCommandBus(parent)
        self._engine_request: EngineRequestSignal = (
            engine_request or self._command_bus.search_requested
        )
        self._dispatch_timer = QTimer(parent)
        self._dispatch_timer.setSingleShot(True)
        self._dispatch_timer.timeout.connect(self._emit_pending_request)

        self._engine_thread = QThread(parent)
        self._engine_worker = EngineWorker(
            difficulty=self._settings.difficulty, seed=self._settings.seed
        )
        self._engine_request_id = 0
        self._pending_engine_request: int | None = None
        self._pending_engine_board: Board | None = None
        self._pending_engine_side: Color | None = None
        self._remaining_failure_retries = 0
        self._is_shutting_down = False
        self._is_started = False

    def setup(self) -> None:
        """Start the worker in a dedicated thread and connect callbacks."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._engine_worker.moveToThread(self._engine_thread)
        self._engine_request.connect(self._engine_worker.request_move)
        # Direct: the worker thread stays blocked in the search until the flag is set.
        self._command_bus.cancel_requested.connect(
            self._engine_worker.cancel, Qt.ConnectionType.DirectConnection
        )
        self._command_bus.set_difficulty_requested.connect(
            self._engine_worker.set_difficulty
        )
        self._engine_worker.move_ready.connect(self._on_engine_move)
        self._engine_worker.search_cancelled.connect(self._on_engine_cancelled)
        self._engine_worker.search_no_move.connect(self._on_engine_no_move)
        self._engine_worker.search_error.connect(self._on_engine_error)
        self._engine_thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Stop any active search and shut down the worker thread."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self.cancel_ai_search()
        self._engine_thread.quit()
        self._engine_thread.wait(2000)
        self._clear_pending_request()
        self._is_started = False

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Update the difficulty for subsequent searches."""
        self._settings.difficulty = difficulty
        if self._is_started:
            self._command_bus.set_difficulty_requested.emit(int(difficulty))
            return
        self._engine_worker.set_difficulty(int(difficulty))

    def create_ai_player(self, color: Color) -> AIPlayer:
        """Create an automated player wired to this session."""
        return _SessionAIPlayer(
            color,
            self._settings,
            on_request_move=self.request_ai_move,
            on_cancel=self.cancel_ai_search,
        )

    def request_ai_move(self, board: Board, side: Color) -> None:
        """Queue a move selection for *side* on *board*."""
        if not self._is_started or self._is_shutting_down:
            return
        self._queue_request(board.copy(), side, reset_retry_budget=True)

    def cancel_ai_search(self) -> None:
        """Cancel any pending/active engine request."""
        self._dispatch_timer.stop()
        self._clear_pending_request()
        if self._is_started:
            self._command_bus.cancel_requested.emit()

    # ── Worker callbacks ─────────────────────────────────────────────────

    def _on_engine_move(self, request_id: int, move_obj: object) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            return
        if not isinstance(move_obj, Move):
            return
        if not self._is_current_position():
            return

        self._clear_pending_request()
        self._remaining_failure_retries = 0
        if not self._controller.submit_move(move_obj):
            _LOGGER.warning("Controller rejected engine move %s", move_obj)

    def _on_engine_no_move(self, request_id: int) -> None:
        self._handle_engine_failure(request_id, "Engine produced no move")

    def _on_engine_error(self, request_id: int, message: str) -> None:
        self._handle_engine_failure(request_id, message)

    def _on_engine_cancelled(self, request_id: int) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            return
        self._clear_pending_request()
        self._remaining_failure_retries = 0

    # ── Internal helpers ─────────────────────────────────────────────────

    def _queue_request(
        self, board: Board, side: Color, *, reset_retry_budget: bool
    ) -> None:
        self.cancel_ai_search()
        if self._is_shutting_down:
            return

        self._engine_request_id += 1
        self._pending_engine_request = self._engine_request_id
        self._pending_engine_board = board
        self._pending_engine_side = side
        if reset_retry_budget:
            self._remaining_failure_retries = self._MAX_FAILURE_RETRIES
        self._dispatch_timer.start(max(self._settings.move_delay_ms, 0))

    def _emit_pending_request(self) -> None:
        if self._is_shutting_down:
            return

        request_id = self._pending_engine_request
        board = self._pending_engine_board
        side = self._pending_engine_side
        if request_id is None or board is None or side is None:
            return
        # The worker owns its own copy for the duration of the search.
        self._engine_request.emit(board.copy(), side, request_id)

    def _is_current_position(self) -> bool:
        state = self._controller.state
        if state.phase != GamePhase.THINKING:
            return False
        return (
            self._pending_engine_side == state.side_to_move
            and self._pending_engine_board == state.board
        )

    def _clear_pending_request(self) -> None:
        self._pending_engine_request = None
        self._pending_engine_board = None
        self._pending_engine_side = None

    def _handle_engine_failure(self, request_id: int, message: str) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            return

        state = self._controller.state
        if state.phase != GamePhase.THINKING:
            self._clear_pending_request()
            return

        if self._remaining_failure_retries > 0:
            self._remaining_failure_retries -= 1
            _LOGGER.warning("Engine request %d failed (%s); retrying", request_id, message)
            self._queue_request(
                state.board.copy(), state.side_to_move, reset_retry_budget=False
            )
            return

        self._clear_pending_request()
        _LOGGER.error("Engine gave up on request %d: %s", request_id, message)
        self._set_status(f"Engine error: {message}")

        # Keep the game moving with the first legal move.
        legal = state.legal_moves()
        if legal:
            self._controller.submit_move(legal[0])
