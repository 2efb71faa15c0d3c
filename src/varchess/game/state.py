"""Game state machine — board snapshot, side to move, phase and result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from varchess.config import DEFAULT_BOARD_SIZE
from varchess.core.board import Board
from varchess.core.enums import Color, GameResult
from varchess.core.move import Move
from varchess.core.move_generator import MoveGenerator
from varchess.core.piece import Piece
from varchess.core.rules import Rules
from varchess.core.types import Square
from varchess.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """Summary of the move that was just committed."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    was_promotion: bool = False
    was_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Manages game lifecycle: board, side to move, phase, result.

    This is a pure data/logic class — no threading, no UI.
    """

    board: Board = field(init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    last_move: MoveRecord | None = field(default=None, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game from a copy of *board*."""
        self.board = board.copy() if board is not None else Board.initial(DEFAULT_BOARD_SIZE)
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.last_move = None
        # An edited position may already be decided.
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Commit a validated move and return its record.

        Caller is responsible for the legality check. The board is replaced
        by a new snapshot; a pawn reaching the far rank becomes a queen.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece to move on {move.from_sq}")
        captured = self.board[move.to_sq]
        was_promotion = self.board.is_promotion_square(piece, move.to_sq)

        self.board = self.board.with_move(move, promote=True)
        self.side_to_move = self.side_to_move.opposite

        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            was_promotion=was_promotion,
            was_check=Rules.is_in_check(self.board, self.side_to_move),
        )
        self.last_move = record

        self._check_game_over()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.board, self.side_to_move)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.board, self.side_to_move).generate_legal_moves()

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Destinations to highlight for the piece on *from_sq*."""
        return MoveGenerator(self.board, self.side_to_move).legal_destinations(from_sq)

    def is_legal(self, move: Move) -> bool:
        return MoveGenerator(self.board, self.side_to_move).is_legal(move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s", result.name)
