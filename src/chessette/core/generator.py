"""Randomized starting positions by reject-and-retry sampling."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from chessette.core.board import Board
from chessette.core.enums import Color, PieceType
from chessette.core.piece import Piece, PieceLike
from chessette.core.position import Position
from chessette.core.rules import Rules
from chessette.core.types import BoardGeometry, Square, chebyshev_distance

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3000


def generate_starting_position(
    pieces: Iterable[PieceLike] = (),
    *,
    geometry: BoardGeometry | None = None,
    turn: Color | str = Color.WHITE,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    allow_starting_check: bool = False,
    rng: random.Random | None = None,
) -> Position:
    """Place both kings plus *pieces* at random until the position is valid.

    Each attempt puts the white king anywhere, the black king on a square not
    adjacent to it, then every extra piece on a random free square.  The board
    is accepted when the kings are separated, nobody is checkmated and, unless
    *allow_starting_check* is set, nobody is in check.

    When *max_attempts* runs out, an empty position is returned; check
    :attr:`Position.is_playable` before handing it to a player.
    """
    geometry = geometry if geometry is not None else BoardGeometry()
    side = Color.from_token(turn)
    extras = [Piece.coerce(p) for p in pieces]
    if any(p.piece_type == PieceType.KING for p in extras):
        raise ValueError("Kings are placed by the generator, not passed as extras")
    rng = rng if rng is not None else random.Random()

    for attempt in range(1, max_attempts + 1):
        board = _place_pieces(geometry, extras, rng)
        if board is None:
            continue
        if not _is_acceptable(board, side, allow_starting_check):
            continue
        _LOGGER.debug(
            "Generated %dx%d position with %d pieces after %d attempt(s)",
            geometry.size,
            geometry.size,
            len(board),
            attempt,
        )
        return Position(board, side)

    _LOGGER.warning(
        "No valid %dx%d position for %d extra piece(s) within %d attempts",
        geometry.size,
        geometry.size,
        len(extras),
        max_attempts,
    )
    return Position.empty(geometry, side)


def _place_pieces(
    geometry: BoardGeometry,
    extras: list[Piece],
    rng: random.Random,
) -> Board | None:
    """One random placement, or ``None`` when squares run out."""
    available: list[Square] = list(geometry.squares())

    white_king = rng.choice(available)
    available.remove(white_king)

    candidates = [sq for sq in available if chebyshev_distance(sq, white_king) > 1]
    if not candidates:
        return None
    black_king = rng.choice(candidates)
    available.remove(black_king)

    board = Board(geometry)
    board[white_king] = Piece(Color.WHITE, PieceType.KING)
    board[black_king] = Piece(Color.BLACK, PieceType.KING)

    for piece in extras:
        if not available:
            return None
        sq = rng.choice(available)
        available.remove(sq)
        board[sq] = piece
    return board


def _is_acceptable(board: Board, turn: Color, allow_starting_check: bool) -> bool:
    if not board.kings_separated():
        return False
    if not allow_starting_check and (
        Rules.is_check(board, turn) or Rules.is_check(board, turn.opposite)
    ):
        return False
    return not (
        Rules.is_checkmate(board, Color.WHITE) or Rules.is_checkmate(board, Color.BLACK)
    )
