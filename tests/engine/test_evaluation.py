"""Tests for static material evaluation."""

from varchess.core.board import Board
from varchess.core.enums import Color, PieceType
from varchess.core.notation import board_from_text
from varchess.core.piece import Piece
from varchess.engine.evaluation import PIECE_VALUES, evaluate


class TestEvaluate:
    def test_kings_cancel_out(self) -> None:
        assert evaluate(Board.initial(8)) == 0

    def test_empty_board(self) -> None:
        assert evaluate(Board(6)) == 0

    def test_piece_values(self) -> None:
        assert PIECE_VALUES == {
            PieceType.PAWN: 10,
            PieceType.KNIGHT: 30,
            PieceType.BISHOP: 30,
            PieceType.ROOK: 50,
            PieceType.QUEEN: 90,
            PieceType.KING: 900,
        }

    def test_white_positive_black_negative(self) -> None:
        board = Board.initial(5)
        board[(3, 0)] = Piece(Color.WHITE, PieceType.QUEEN)
        assert evaluate(board) == 90
        board[(1, 0)] = Piece(Color.BLACK, PieceType.ROOK)
        assert evaluate(board) == 40

    def test_lone_king(self) -> None:
        board = board_from_text("..k../...../...../...../.....")
        assert evaluate(board) == -900

    def test_position_is_ignored(self) -> None:
        a = board_from_text("..k../.N.../...../...../..K..")
        b = board_from_text("..k../...../...../N..../..K..")
        assert evaluate(a) == evaluate(b) == 30
