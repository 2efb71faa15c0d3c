"""Pure-Python minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
import random

from varchess.core.board import Board
from varchess.core.enums import Color
from varchess.core.move import Move
from varchess.core.move_generator import MoveGenerator
from varchess.engine.evaluation import evaluate
from varchess.engine.search import (
    MATE_SCORE,
    CancelCheck,
    IEngine,
    SearchLimits,
    SearchResult,
)

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000


def _never_cancelled() -> bool:
    return False


class MinimaxSearchEngine(IEngine):
    """Depth-bounded minimax over cloned boards.

    Scores are white-centric: white maximises, black minimises. Every child
    node gets its own board copy, so sibling branches never share state.
    Promotion is not played inside the tree; a pawn reaching the far rank in
    a hypothetical line is still scored as a pawn.
    """

    __slots__ = ("_rng", "_nodes", "_cancel_check", "_stopped")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._nodes = 0
        self._cancel_check: CancelCheck = _never_cancelled
        self._stopped = False

    @property
    def nodes(self) -> int:
        """Nodes visited by the last search."""
        return self._nodes

    def search(
        self,
        board: Board,
        side: Color,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        if limits.depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        self._stopped = False
        self._cancel_check = is_cancelled or _never_cancelled

        gen = MoveGenerator(board, side)
        root_moves = gen.generate_legal_moves()
        if not root_moves:
            if gen.is_in_check():
                score = -MATE_SCORE if side == Color.WHITE else MATE_SCORE
                return SearchResult(None, score, 0, self._nodes)
            return SearchResult(None, 0, 0, self._nodes)

        # Shuffled so equal-valued moves are not always resolved the same way.
        candidates = root_moves.copy()
        self._rng.shuffle(candidates)

        maximizing = side == Color.WHITE
        best_score = -_INF_SCORE if maximizing else _INF_SCORE
        best_move: Move | None = None

        for move in candidates:
            if self._should_stop():
                break
            score = self.minimax(
                board.with_move(move),
                limits.depth - 1,
                not maximizing,
                -_INF_SCORE,
                _INF_SCORE,
                side.opposite,
            )
            if (maximizing and score > best_score) or (
                not maximizing and score < best_score
            ):
                best_score = score
                best_move = move

        if best_move is None:
            _LOGGER.warning(
                "No best move recorded for %s; falling back to first legal move", side
            )
            best_move = root_moves[0]
            best_score = evaluate(board.with_move(best_move))

        completed_depth = 0 if self._stopped else limits.depth
        _LOGGER.debug(
            "search %s depth=%d nodes=%d score=%d move=%s",
            side,
            completed_depth,
            self._nodes,
            best_score,
            best_move,
        )
        return SearchResult(best_move, best_score, completed_depth, self._nodes)

    def minimax(
        self,
        board: Board,
        depth: int,
        maximizing_white: bool,
        alpha: int,
        beta: int,
        side: Color,
    ) -> int:
        """Score *board* with *side* to move, searching *depth* plies."""
        if self._should_stop():
            return evaluate(board)

        self._nodes += 1

        if depth <= 0:
            return evaluate(board)

        gen = MoveGenerator(board, side)
        legal = gen.generate_legal_moves()
        if not legal:
            if gen.is_in_check():
                return -MATE_SCORE if maximizing_white else MATE_SCORE
            return 0

        next_side = side.opposite
        if maximizing_white:
            best_score = -_INF_SCORE
            for move in legal:
                score = self.minimax(
                    board.with_move(move), depth - 1, False, alpha, beta, next_side
                )
                best_score = max(best_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best_score

        best_score = _INF_SCORE
        for move in legal:
            score = self.minimax(
                board.with_move(move), depth - 1, True, alpha, beta, next_side
            )
            best_score = min(best_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best_score

    def _should_stop(self) -> bool:
        if not self._stopped and self._cancel_check():
            self._stopped = True
        return self._stopped
