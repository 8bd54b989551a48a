"""Tests for Rules: check, checkmate, stalemate, status."""

import pytest

from chessette.core.enums import Color, GameResult, GameStatus
from chessette.core.position import Position
from chessette.core.rules import Rules

W_KING = ("king", "white")
B_KING = ("king", "black")


@pytest.fixture
def mated_board(make_board):
    # Rook checks along rank 4; the white king covers A3/B3 by separation.
    return make_board({"A4": B_KING, "B2": W_KING, "D4": ("rook", "white")})


class TestCheck:
    def test_in_check(self, mated_board) -> None:
        assert Rules.is_check(mated_board, Color.BLACK)
        assert not Rules.is_check(mated_board, Color.WHITE)

    def test_check_with_escape(self, make_board) -> None:
        board = make_board({"A4": B_KING, "B4": ("r", "w"), "D2": W_KING})
        assert Rules.is_check(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        targets = {m.to_sq.name for m in Rules.all_legal_moves(board, Color.BLACK)}
        assert targets == {"A3", "B4"}
        assert Rules.status(board, Color.BLACK) == GameStatus.CHECK


class TestCheckmate:
    def test_corner_mate(self, mated_board) -> None:
        assert Rules.is_checkmate(mated_board, Color.BLACK)
        assert Rules.all_legal_moves(mated_board, Color.BLACK) == []
        assert Rules.status(mated_board, Color.BLACK) == GameStatus.CHECKMATE

    def test_removing_attacker_lifts_mate(self, mated_board) -> None:
        board = mated_board.copy()
        board["D4"] = None
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert not Rules.is_check(board, Color.BLACK)
        assert Rules.status(board, Color.BLACK) == GameStatus.ONGOING
        # The live board is untouched by the simulation above.
        assert Rules.is_checkmate(mated_board, Color.BLACK)

    def test_mate_on_5x5(self, make_board) -> None:
        board = make_board({"A5": B_KING, "B3": W_KING, "E5": ("r", "w")}, size=5)
        assert Rules.is_checkmate(board, Color.BLACK)

    def test_result_names_winner(self, mated_board) -> None:
        pos = Position(mated_board, Color.BLACK)
        assert Rules.game_result(pos) == GameResult.WHITE_WINS


class TestStalemate:
    def test_king_boxed_in(self, make_board) -> None:
        board = make_board({"A4": B_KING, "B2": W_KING, "C3": ("bishop", "white")})
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.status(board, Color.BLACK) == GameStatus.STALEMATE
        assert Rules.game_result(Position(board, Color.BLACK)) == GameResult.DRAW

    def test_defended_piece_stalemate(self, make_board) -> None:
        board = make_board(
            {"A1": W_KING, "B2": ("r", "b"), "D4": ("b", "b"), "D1": B_KING}
        )
        assert Rules.is_stalemate(board, Color.WHITE)

    def test_not_stalemate_when_has_moves(self, make_board) -> None:
        board = make_board({"A4": B_KING, "B2": W_KING})
        assert not Rules.is_stalemate(board, Color.BLACK)


class TestProperties:
    @pytest.mark.parametrize(
        "placement",
        [
            {"A4": B_KING, "B2": W_KING, "D4": ("r", "w")},
            {"A4": B_KING, "B2": W_KING, "C3": ("b", "w")},
            {"A4": B_KING, "B4": ("r", "w"), "D2": W_KING},
            {"A1": W_KING, "D4": B_KING, "B3": ("q", "b"), "C1": ("n", "w")},
        ],
    )
    def test_mate_implies_check_and_no_moves(self, make_board, placement) -> None:
        board = make_board(placement)
        for color in Color:
            moves = Rules.all_legal_moves(board, color)
            if Rules.is_checkmate(board, color):
                assert Rules.is_check(board, color)
                assert moves == []
            if Rules.is_stalemate(board, color):
                assert not Rules.is_check(board, color)
                assert moves == []

    def test_in_progress(self, make_board) -> None:
        pos = Position(make_board({"A1": W_KING, "D4": B_KING}))
        assert Rules.game_result(pos) == GameResult.IN_PROGRESS
