"""Tests for the functional front-end contract."""

import random

import chessette
from chessette.core.board import Board
from chessette.core.enums import Color, GameStatus, PieceType
from chessette.core.position import Position

W_KING = ("king", "white")
B_KING = ("king", "black")


def _mate_in_one() -> Position:
    board = Board.from_placement({"A4": B_KING, "B2": W_KING, "D1": ("rook", "white")})
    return Position(board, Color.WHITE)


class TestNewGame:
    def test_playable_position(self) -> None:
        pos = chessette.new_game(4, [("rook", "w"), ("bishop", "b")], rng=random.Random(5))
        assert pos.is_playable
        assert pos.turn == Color.WHITE
        assert pos.board.count(Color.WHITE, PieceType.ROOK) == 1

    def test_black_to_move_on_5x5(self) -> None:
        pos = chessette.new_game(5, [("queen", "b")], "black", rng=random.Random(5))
        assert pos.geometry.size == 5
        assert pos.turn == Color.BLACK

    def test_overfull_board_is_unavailable(self) -> None:
        pos = chessette.new_game(4, [("knight", "w")] * 15, max_attempts=10)
        assert not pos.is_playable
        assert len(pos.board) == 0


class TestLegalMoves:
    def test_rook_targets(self) -> None:
        names = {sq.name for sq in chessette.legal_moves(_mate_in_one(), "D1")}
        assert names == {"A1", "B1", "C1", "D2", "D3", "D4"}

    def test_wrong_turn_piece_has_no_moves(self) -> None:
        assert chessette.legal_moves(_mate_in_one(), "A4") == []

    def test_empty_and_invalid_squares(self) -> None:
        pos = _mate_in_one()
        assert chessette.legal_moves(pos, "C3") == []
        assert chessette.legal_moves(pos, "E5") == []
        assert chessette.legal_moves(pos, "nonsense") == []


class TestApplyAndClassify:
    def test_apply_move_passes_turn(self) -> None:
        before = _mate_in_one()
        after = chessette.apply_move(before, "D1", "D3")
        assert after.turn == Color.BLACK
        assert after.board["D3"] is not None
        assert after.board["D1"] is None
        # the input position is untouched
        assert before.board["D1"] is not None

    def test_classify_ongoing(self) -> None:
        assert chessette.classify(_mate_in_one()) == GameStatus.ONGOING

    def test_classify_checkmate(self) -> None:
        after = chessette.apply_move(_mate_in_one(), "D1", "D4")
        assert chessette.classify(after) == GameStatus.CHECKMATE
