"""Tests for checkmate / stalemate detection."""

from varchess.core.board import Board
from varchess.core.enums import Color, GameResult
from varchess.core.notation import board_from_text
from varchess.core.rules import Rules

# Black king cornered by a rook on the back row, escape squares covered by the king.
BACK_ROW_MATE = "k...R/...../.K.../...../....."
# Black king boxed in by a queen a knight's jump away.
CORNER_STALEMATE = "k..../..Q../...../...../....K"


class TestCheckmate:
    def test_back_row_mate(self) -> None:
        board = board_from_text(BACK_ROW_MATE)
        assert Rules.is_in_check(board, Color.BLACK)
        assert Rules.is_checkmate(board, Color.BLACK)
        assert not Rules.is_stalemate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_check_with_escape_is_not_mate(self) -> None:
        board = board_from_text("k...R/...../...../...../....K")
        assert Rules.is_in_check(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.IN_PROGRESS

    def test_black_mates_white(self) -> None:
        board = board_from_text("...../...../...k./...../r...K")
        assert Rules.game_result(board, Color.WHITE) == GameResult.BLACK_WINS


class TestStalemate:
    def test_corner_stalemate(self) -> None:
        board = board_from_text(CORNER_STALEMATE)
        assert not Rules.is_in_check(board, Color.BLACK)
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.STALEMATE

    def test_spare_pawn_move_avoids_stalemate(self) -> None:
        board = board_from_text("k..../..Q../....p/...../....K")
        assert Rules.game_result(board, Color.BLACK) == GameResult.IN_PROGRESS

    def test_side_without_pieces_is_stalemated(self) -> None:
        board = board_from_text("..k../...../...../...../.....")
        assert Rules.game_result(board, Color.WHITE) == GameResult.STALEMATE


class TestGameResult:
    def test_initial_position_in_progress(self) -> None:
        for size in range(5, 11):
            board = Board.initial(size)
            assert Rules.game_result(board, Color.WHITE) == GameResult.IN_PROGRESS

    def test_winner(self) -> None:
        assert GameResult.WHITE_WINS.winner == Color.WHITE
        assert GameResult.BLACK_WINS.winner == Color.BLACK
        assert GameResult.STALEMATE.winner is None
        assert GameResult.IN_PROGRESS.winner is None
