"""Console self-play runner."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from varchess.config import DEFAULT_BOARD_SIZE, validate_board_size
from varchess.core.board import Board
from varchess.core.enums import Color, GameResult
from varchess.core.notation import board_from_text
from varchess.engine.policy import MoveSelector
from varchess.engine.search import Difficulty
from varchess.game.controller import TurnController
from varchess.game.player import LocalAIPlayer

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_PLIES = 200


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="varchess",
        description="Play the automated side against itself on an N x N board",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help="Board size (5-10), ignored when --layout is given",
    )
    parser.add_argument(
        "--layout",
        help="Starting layout, rows separated by '/', e.g. '..k../...../..K..'",
    )
    parser.add_argument("--white", default="hard", help="White difficulty")
    parser.add_argument("--black", default="medium", help="Black difficulty")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--max-plies",
        type=int,
        default=DEFAULT_MAX_PLIES,
        help="Stop after this many half-moves",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def play(
    board: Board,
    white: Difficulty,
    black: Difficulty,
    *,
    rng: random.Random | None = None,
    max_plies: int = DEFAULT_MAX_PLIES,
    echo: bool = False,
) -> GameResult:
    """Play both sides from *board* and return the result.

    Returns ``IN_PROGRESS`` when *max_plies* is reached first.
    """
    selector = MoveSelector(rng or random.Random())
    players = {
        Color.WHITE: LocalAIPlayer(Color.WHITE, white, selector),
        Color.BLACK: LocalAIPlayer(Color.BLACK, black, selector),
    }
    ctrl = TurnController()
    if echo:
        ctrl.events.on_move.append(
            lambda record, state: print(f"{record.move}\n{state.board!r}\n")
        )
    ctrl.new_game(players[Color.WHITE], players[Color.BLACK], board)

    for _ in range(max_plies):
        if ctrl.state.is_game_over:
            break
        mover = players[ctrl.state.side_to_move]
        move = mover.take_move()
        if move is None or not ctrl.submit_move(move):
            _LOGGER.error("%s failed to produce a legal move", mover.name)
            break
    return ctrl.state.result


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.layout:
            board = board_from_text(args.layout)
        else:
            board = Board.initial(validate_board_size(args.size))
        white = Difficulty.from_label(args.white)
        black = Difficulty.from_label(args.black)
    except ValueError as exc:
        _LOGGER.error("%s", exc)
        return 2

    print(f"{board!r}\n")
    result = play(
        board,
        white,
        black,
        rng=random.Random(args.seed),
        max_plies=args.max_plies,
        echo=True,
    )
    print(f"Result: {result.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
