"""Functional engine contract for front ends.

These four calls are all a UI needs to drive a game without holding a
:class:`~chessette.game.GameController`::

    pos = new_game(4, [("rook", "w"), ("bishop", "b")])
    if pos.is_playable:
        targets = legal_moves(pos, "A1")
        pos = apply_move(pos, "A1", targets[0])
        print(classify(pos))
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from chessette.core.enums import Color, GameStatus
from chessette.core.generator import DEFAULT_MAX_ATTEMPTS, generate_starting_position
from chessette.core.piece import PieceLike
from chessette.core.position import Position
from chessette.core.rules import Rules
from chessette.core.types import BoardGeometry, Square, SquareLike


def new_game(
    board_size: int,
    additional_pieces: Iterable[PieceLike] = (),
    turn: Color | str = Color.WHITE,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    allow_starting_check: bool = False,
    rng: random.Random | None = None,
) -> Position:
    """Generate a starting position.

    The result may be the empty fallback position; callers must check
    :attr:`Position.is_playable` and treat ``False`` as "no game available".
    """
    return generate_starting_position(
        additional_pieces,
        geometry=BoardGeometry(board_size),
        turn=turn,
        max_attempts=max_attempts,
        allow_starting_check=allow_starting_check,
        rng=rng,
    )


def legal_moves(position: Position, square: SquareLike) -> list[Square]:
    """Legal destinations for the piece on *square*.

    Empty when the square is invalid or empty, or holds a piece of the side
    not to move.
    """
    piece = position.board[square]
    if piece is None or piece.color != position.turn:
        return []
    return Rules.legal_targets(position.board, square)


def apply_move(position: Position, from_sq: SquareLike, to_sq: SquareLike) -> Position:
    """Play *from_sq* → *to_sq* without validation and pass the turn."""
    return position.apply_move(from_sq, to_sq)


def classify(position: Position) -> GameStatus:
    """Status of *position* for the side to move."""
    return Rules.status(position.board, position.turn)
