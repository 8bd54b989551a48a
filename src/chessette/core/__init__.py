"""Core domain layer: pure rules logic with zero external dependencies.

Quick start::

    from chessette.core import BoardGeometry, Rules, generate_starting_position

    pos = generate_starting_position(
        [("rook", "white"), ("bishop", "black")],
        geometry=BoardGeometry(4),
    )
    for move in Rules.all_legal_moves(pos.board, pos.turn):
        print(move)
"""

from chessette.core.board import Board
from chessette.core.enums import Color, GameResult, GameStatus, PieceType
from chessette.core.generator import DEFAULT_MAX_ATTEMPTS, generate_starting_position
from chessette.core.move import Move
from chessette.core.move_generator import MoveGenerator
from chessette.core.piece import Piece
from chessette.core.position import Position
from chessette.core.rules import Rules
from chessette.core.types import (
    SUPPORTED_SIZES,
    BoardGeometry,
    Square,
    chebyshev_distance,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "SUPPORTED_SIZES",
    "BoardGeometry",
    "Square",
    "chebyshev_distance",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Setup
    "DEFAULT_MAX_ATTEMPTS",
    "generate_starting_position",
]
