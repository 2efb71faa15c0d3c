"""Difficulty-driven move selection for the automated side."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from varchess.core.move_generator import MoveGenerator
from varchess.engine.minimax_search import MinimaxSearchEngine
from varchess.engine.search import CancelCheck, Difficulty, IEngine, SearchLimits

if TYPE_CHECKING:
    from varchess.core.board import Board
    from varchess.core.enums import Color
    from varchess.core.move import Move

_LOGGER = logging.getLogger(__name__)

# Medium difficulty ignores available captures this often.
CAPTURE_SKIP_PROBABILITY = 0.3


class MoveSelector:
    """Picks one move per automated turn according to a :class:`Difficulty`.

    Args:
        rng: Randomness source shared by the random policies and the search
            root shuffle. Pass a seeded ``random.Random`` for reproducible
            play.
        engine: Search engine for the minimax levels. Defaults to a
            :class:`MinimaxSearchEngine` drawing from *rng*.
    """

    __slots__ = ("_rng", "_engine")

    def __init__(
        self,
        rng: random.Random | None = None,
        engine: IEngine | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._engine = engine or MinimaxSearchEngine(self._rng)

    @property
    def engine(self) -> IEngine:
        return self._engine

    def select_move(
        self,
        board: Board,
        side: Color,
        difficulty: Difficulty,
        is_cancelled: CancelCheck | None = None,
    ) -> Move | None:
        """A move for *side*, or None only when it has no legal move."""
        legal = MoveGenerator(board, side).generate_legal_moves()
        if not legal:
            return None

        if difficulty == Difficulty.EASY:
            return self._rng.choice(legal)

        if difficulty == Difficulty.MEDIUM:
            captures = [m for m in legal if board[m.to_sq] is not None]
            if captures and self._rng.random() > CAPTURE_SKIP_PROBABILITY:
                return self._rng.choice(captures)
            return self._rng.choice(legal)

        depth = difficulty.search_depth
        assert depth is not None
        result = self._engine.search(board, side, SearchLimits(depth=depth), is_cancelled)
        _LOGGER.debug(
            "%s picked %s for %s (score=%d, nodes=%d)",
            difficulty,
            result.best_move,
            side,
            result.score,
            result.nodes,
        )
        return result.best_move


def select_automated_move(
    board: Board,
    side: Color,
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> Move | None:
    """One-shot boundary helper around :class:`MoveSelector`."""
    return MoveSelector(rng).select_move(board, side, difficulty)
