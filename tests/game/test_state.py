"""Tests for GameState."""

import pytest

from chessette.core.board import Board
from chessette.core.enums import Color, GameResult, GameStatus
from chessette.core.position import Position
from chessette.core.types import BoardGeometry
from chessette.game.interfaces import GamePhase
from chessette.game.state import GameState

W_KING = ("king", "white")
B_KING = ("king", "black")


def _position(placement, turn: Color = Color.WHITE, size: int = 4) -> Position:
    return Position(Board.from_placement(placement, BoardGeometry(size)), turn)


class TestGameStateSetup:
    def test_not_started(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == Color.WHITE
        assert not gs.accepts_moves

    def test_setup(self) -> None:
        gs = GameState()
        gs.setup(_position({"A1": W_KING, "D4": B_KING}))
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.status == GameStatus.ONGOING
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.move_count == 0

    def test_setup_unavailable(self) -> None:
        gs = GameState()
        gs.setup(Position.empty())
        assert gs.phase == GamePhase.UNAVAILABLE
        assert gs.legal_targets("A1") == []

    def test_setup_stalemate_is_over(self) -> None:
        gs = GameState()
        gs.setup(_position({"A4": B_KING, "B2": W_KING, "C3": ("b", "w")}, Color.BLACK))
        assert gs.is_game_over
        assert gs.status == GameStatus.STALEMATE
        assert gs.result == GameResult.DRAW

    def test_setup_resets_counter(self) -> None:
        gs = GameState()
        gs.setup(_position({"A1": W_KING, "D4": B_KING}))
        gs.apply_move("A1", "B1")
        assert gs.move_count == 1
        gs.setup(_position({"A1": W_KING, "D4": B_KING}))
        assert gs.move_count == 0


class TestGameStateMoves:
    def test_apply_move(self) -> None:
        gs = GameState()
        gs.setup(_position({"A1": W_KING, "D4": B_KING}))
        move = gs.apply_move("a1", "b2")
        assert str(move) == "A1B2"
        assert gs.side_to_move == Color.BLACK
        assert gs.position.board["B2"] is not None

    def test_apply_move_reaches_mate(self) -> None:
        gs = GameState()
        gs.setup(_position({"A4": B_KING, "B2": W_KING, "D1": ("r", "w")}))
        gs.apply_move("D1", "D4")
        assert gs.status == GameStatus.CHECKMATE
        assert gs.result == GameResult.WHITE_WINS
        assert gs.is_game_over

    def test_apply_move_empty_square(self) -> None:
        gs = GameState()
        gs.setup(_position({"A1": W_KING, "D4": B_KING}))
        with pytest.raises(ValueError, match="Cannot move"):
            gs.apply_move("B2", "B3")

    def test_legal_targets_respect_turn(self) -> None:
        gs = GameState()
        gs.setup(_position({"A1": W_KING, "D4": B_KING}))
        assert gs.legal_targets("D4") == []
        assert {sq.name for sq in gs.legal_targets("A1")} == {"A2", "B1", "B2"}

    def test_legal_moves(self) -> None:
        gs = GameState()
        gs.setup(_position({"A1": W_KING, "D4": B_KING}))
        assert len(gs.legal_moves()) == 3
