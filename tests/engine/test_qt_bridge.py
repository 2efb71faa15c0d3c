"""Tests for the Qt engine worker."""

from PyQt6.QtTest import QSignalSpy

from varchess.core.board import Board
from varchess.core.enums import Color
from varchess.core.move import Move
from varchess.core.move_generator import MoveGenerator
from varchess.core.notation import board_from_text
from varchess.engine.qt_bridge import EngineWorker
from varchess.engine.search import Difficulty


class _CancellingSelector:
    def __init__(self, worker: EngineWorker) -> None:
        self._worker = worker

    def select_move(self, board, side, difficulty, is_cancelled=None):  # type: ignore[no-untyped-def]
        self._worker.cancel()
        return MoveGenerator(board, side).generate_legal_moves()[0]


class _FailingSelector:
    def select_move(self, board, side, difficulty, is_cancelled=None):  # type: ignore[no-untyped-def]
        raise RuntimeError("boom")


class TestEngineWorker:
    def test_emits_move_ready(self, qapp: object) -> None:
        worker = EngineWorker(difficulty=Difficulty.EASY, seed=1)
        spy = QSignalSpy(worker.move_ready)
        board = Board.initial(5)
        worker.request_move(board, Color.WHITE, 7)
        assert len(spy) == 1
        assert spy[0][0] == 7
        move = spy[0][1]
        assert isinstance(move, Move)
        assert move in MoveGenerator(board, Color.WHITE).generate_legal_moves()

    def test_hard_worker_finds_mate(self, qapp: object) -> None:
        worker = EngineWorker(difficulty=Difficulty.HARD, seed=3)
        spy = QSignalSpy(worker.move_ready)
        worker.request_move(board_from_text("k..../...../.K.../...../....R"), Color.WHITE, 1)
        assert spy[0][1] == Move((4, 4), (0, 4))

    def test_no_move_for_checkmated_side(self, qapp: object) -> None:
        worker = EngineWorker(difficulty=Difficulty.HARD, seed=0)
        no_move = QSignalSpy(worker.search_no_move)
        ready = QSignalSpy(worker.move_ready)
        worker.request_move(board_from_text("k...R/...../.K.../...../....."), Color.BLACK, 3)
        assert len(no_move) == 1
        assert no_move[0][0] == 3
        assert len(ready) == 0

    def test_invalid_payload_reports_error(self, qapp: object) -> None:
        worker = EngineWorker()
        spy = QSignalSpy(worker.search_error)
        worker.request_move("not a board", Color.WHITE, 4)
        assert len(spy) == 1
        assert spy[0][0] == 4

    def test_selector_exception_reports_error(self, qapp: object) -> None:
        worker = EngineWorker()
        worker._selector = _FailingSelector()  # type: ignore[assignment]
        spy = QSignalSpy(worker.search_error)
        worker.request_move(Board.initial(5), Color.WHITE, 5)
        assert len(spy) == 1
        assert spy[0][1] == "boom"

    def test_cancel_during_selection(self, qapp: object) -> None:
        worker = EngineWorker()
        worker._selector = _CancellingSelector(worker)  # type: ignore[assignment]
        cancelled = QSignalSpy(worker.search_cancelled)
        ready = QSignalSpy(worker.move_ready)
        worker.request_move(Board.initial(5), Color.WHITE, 6)
        assert len(cancelled) == 1
        assert len(ready) == 0

    def test_stale_cancel_is_cleared_by_next_request(self, qapp: object) -> None:
        worker = EngineWorker(difficulty=Difficulty.EASY, seed=2)
        worker.cancel()
        ready = QSignalSpy(worker.move_ready)
        worker.request_move(Board.initial(5), Color.WHITE, 8)
        assert len(ready) == 1

    def test_set_difficulty(self, qapp: object) -> None:
        worker = EngineWorker(difficulty=Difficulty.EASY)
        worker.set_difficulty(int(Difficulty.VERY_HARD))
        assert worker.difficulty == Difficulty.VERY_HARD
