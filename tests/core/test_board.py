"""Tests for Board."""

import pytest

from varchess.core.board import Board, create_initial_board
from varchess.core.enums import Color, PieceType
from varchess.core.move import Move
from varchess.core.piece import Piece


class TestBoardInitial:
    def test_six_by_six_kings(self) -> None:
        board = create_initial_board(6)
        assert board[(0, 3)] == Piece(Color.BLACK, PieceType.KING)
        assert board[(5, 3)] == Piece(Color.WHITE, PieceType.KING)

    def test_six_by_six_everything_else_empty(self) -> None:
        board = create_initial_board(6)
        occupied = [sq for sq, _ in board.occupied()]
        assert sorted(occupied) == [(0, 3), (5, 3)]

    @pytest.mark.parametrize(("size", "mid"), [(5, 2), (7, 3), (8, 4), (10, 5)])
    def test_kings_on_middle_column(self, size: int, mid: int) -> None:
        board = Board.initial(size)
        assert board.king_square(Color.BLACK) == (0, mid)
        assert board.king_square(Color.WHITE) == (size - 1, mid)

    @pytest.mark.parametrize("size", [0, 4, 11])
    def test_unsupported_size_raises(self, size: int) -> None:
        with pytest.raises(ValueError, match="Board size"):
            Board(size)


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board(5)
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[(3, 1)] = piece
        assert board[(3, 1)] == piece
        assert board.is_empty((2, 1))

    def test_get_off_board_is_none(self) -> None:
        board = Board.initial(5)
        assert board.get((-1, 0)) is None
        assert board.get((0, 5)) is None
        assert board.get((4, 2)) == Piece(Color.WHITE, PieceType.KING)

    def test_copy_independence(self) -> None:
        board = Board.initial(7)
        copy = board.copy()
        assert board == copy
        copy[(6, 3)] = None
        assert board != copy
        assert board[(6, 3)] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square_missing_is_none(self) -> None:
        board = Board(5)
        assert board.king_square(Color.WHITE) is None

    def test_pieces_and_count(self) -> None:
        board = Board.initial(5)
        board[(3, 0)] = Piece(Color.WHITE, PieceType.PAWN)
        board[(3, 4)] = Piece(Color.WHITE, PieceType.PAWN)
        assert board.pieces(Color.WHITE) == [(3, 0), (3, 4), (4, 2)]
        assert board.count(Color.WHITE, PieceType.PAWN) == 2
        assert board.count(Color.BLACK, PieceType.PAWN) == 0

    def test_clear(self) -> None:
        board = Board.initial(6)
        board.clear()
        assert all(board[sq] is None for sq in board.squares())

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial(5))
        assert "K" in text and "k" in text
        assert "0 1 2 3 4" in text


class TestBoardMoves:
    def test_with_move_leaves_original(self) -> None:
        board = Board.initial(5)
        after = board.with_move(Move((4, 2), (3, 2)))
        assert board[(4, 2)] is not None
        assert after[(4, 2)] is None
        assert after[(3, 2)] == Piece(Color.WHITE, PieceType.KING)

    def test_hypothetical_move_does_not_promote(self) -> None:
        board = Board.initial(5)
        board[(1, 4)] = Piece(Color.WHITE, PieceType.PAWN)
        after = board.with_move(Move((1, 4), (0, 4)))
        assert after[(0, 4)] == Piece(Color.WHITE, PieceType.PAWN)

    def test_committed_white_pawn_promotes(self) -> None:
        board = Board.initial(5)
        board[(1, 4)] = Piece(Color.WHITE, PieceType.PAWN)
        after = board.with_move(Move((1, 4), (0, 4)), promote=True)
        assert after[(0, 4)] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_committed_black_pawn_promotes_on_last_row(self) -> None:
        board = Board.initial(6)
        board[(4, 0)] = Piece(Color.BLACK, PieceType.PAWN)
        after = board.with_move(Move((4, 0), (5, 0)), promote=True)
        assert after[(5, 0)] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_commit_marks_piece_moved(self) -> None:
        board = Board.initial(5)
        after = board.with_move(Move((4, 2), (3, 2)), promote=True)
        moved = after[(3, 2)]
        assert moved is not None and moved.has_moved

    def test_move_from_empty_square_is_noop(self) -> None:
        board = Board.initial(5)
        after = board.with_move(Move((2, 2), (1, 2)))
        assert after == board


class TestPiece:
    def test_has_moved_ignored_by_equality(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK, has_moved=True) == Piece(
            Color.WHITE, PieceType.ROOK
        )

    def test_from_char(self) -> None:
        assert Piece.from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)
        assert str(Piece(Color.WHITE, PieceType.QUEEN)) == "Q"

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")


class TestPublicNames:
    def test_core_exports_resolve(self) -> None:
        import varchess.core as core

        missing = [name for name in core.__all__ if not hasattr(core, name)]
        assert missing == []
