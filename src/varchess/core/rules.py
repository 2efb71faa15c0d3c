"""High-level chess rules: checkmate and stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from varchess.core.enums import Color, GameResult
from varchess.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from varchess.core.board import Board


class Rules:
    """Static rule-checker that operates on a board and a side to move."""

    @staticmethod
    def is_in_check(board: Board, side: Color) -> bool:
        return MoveGenerator(board, side).is_in_check()

    @staticmethod
    def is_checkmate(board: Board, side: Color) -> bool:
        gen = MoveGenerator(board, side)
        return gen.is_in_check() and not gen.has_legal_moves()

    @staticmethod
    def is_stalemate(board: Board, side: Color) -> bool:
        gen = MoveGenerator(board, side)
        return not gen.is_in_check() and not gen.has_legal_moves()

    @staticmethod
    def game_result(board: Board, side: Color) -> GameResult:
        """Determine the result with *side* to move."""
        gen = MoveGenerator(board, side)
        if gen.has_legal_moves():
            return GameResult.IN_PROGRESS
        if gen.is_in_check():
            return GameResult.checkmate_for(side)
        return GameResult.STALEMATE
