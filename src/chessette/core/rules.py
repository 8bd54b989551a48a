"""High-level rules: check, checkmate, stalemate, game status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessette.core.enums import Color, GameResult, GameStatus
from chessette.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessette.core.board import Board
    from chessette.core.move import Move
    from chessette.core.position import Position
    from chessette.core.types import Square, SquareLike


class Rules:
    """Static rule-checker; every method is a pure function of its arguments."""

    @staticmethod
    def is_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def legal_targets(board: Board, square: SquareLike) -> list[Square]:
        return MoveGenerator(board).legal_targets(square)

    @staticmethod
    def all_legal_moves(board: Board, color: Color) -> list[Move]:
        return MoveGenerator(board).generate_legal_moves(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Classify the position from *color*'s point of view."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(color)
        if gen.generate_legal_moves(color):
            return GameStatus.CHECK if in_check else GameStatus.ONGOING
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result for the side to move."""
        status = Rules.status(position.board, position.turn)
        return Rules.result_for(status, position.turn)

    @staticmethod
    def result_for(status: GameStatus, turn: Color) -> GameResult:
        """Game result implied by *status* when *turn* is to move."""
        if status == GameStatus.CHECKMATE:
            return GameResult.BLACK_WINS if turn == Color.WHITE else GameResult.WHITE_WINS
        if status == GameStatus.STALEMATE:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS
