"""TurnController — the orchestrator of a game.

Coordinates: Players, GameState, MoveGenerator.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from varchess.config import GameConfig, GameMode
from varchess.core.board import Board
from varchess.core.enums import Color, GameResult
from varchess.core.move import Move
from varchess.game.interfaces import GamePhase, IGameController, IPlayer
from varchess.game.player import HumanPlayer, LocalAIPlayer
from varchess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
AIFactory = Callable[[Color], IPlayer]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController(IGameController):
    """Orchestrates a game: validates moves, alternates turns, detects the
    end of the game and notifies listeners.

    Methods are meant to be called from a single thread. Automated moves
    arrive through ``submit_move`` like human ones; while the automated side
    is thinking, :attr:`accepts_human_input` is False.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        if self._state.phase == GamePhase.NOT_STARTED:
            return None
        return self._players.get(self._state.side_to_move)

    @property
    def accepts_human_input(self) -> bool:
        cp = self.current_player
        return (
            cp is not None
            and cp.is_human
            and self._state.phase == GamePhase.AWAITING_MOVE
        )

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        for cp in self._players.values():
            cp.cancel()
        self._players = {Color.WHITE: white, Color.BLACK: black}

        self._state = GameState()
        self._state.setup(board, side_to_move)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return

        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def start(self, config: GameConfig, ai_factory: AIFactory | None = None) -> None:
        """Start a game from *config*.

        In PvE the side named by ``config.ai_color`` is built by *ai_factory*
        (a synchronous :class:`LocalAIPlayer` by default); every other seat is
        a :class:`HumanPlayer`.
        """
        white, black = players_for(config, ai_factory)
        self.new_game(white, black, config.starting_board())

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        if not self._state.is_legal(move):
            _LOGGER.debug("Rejected illegal move %s for %s", move, self._state.side_to_move)
            return False

        record = self._state.apply_move(move)
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board.copy(), self._state.side_to_move)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game finished: %s", result.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)


def players_for(
    config: GameConfig, ai_factory: AIFactory | None = None
) -> tuple[IPlayer, IPlayer]:
    """(white, black) players for *config*."""
    make_ai = ai_factory or (lambda color: LocalAIPlayer(color, config.difficulty))
    seats: dict[Color, IPlayer] = {}
    for color in Color:
        if config.mode == GameMode.PVE and color == config.ai_color:
            seats[color] = make_ai(color)
        else:
            seats[color] = HumanPlayer(color)
    return seats[Color.WHITE], seats[Color.BLACK]
