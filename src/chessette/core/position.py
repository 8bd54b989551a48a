"""Position: a board together with the side to move."""

from __future__ import annotations

from dataclasses import dataclass

from chessette.core.board import Board
from chessette.core.enums import Color, PieceType
from chessette.core.types import BoardGeometry, SquareLike


@dataclass(frozen=True, slots=True)
class Position:
    """Snapshot of a game: board + side to move.

    Positions are replaced wholesale; :meth:`apply_move` returns a new
    position and leaves this one untouched.  They compare by value but are
    not hashable, since the board itself is mutable.
    """

    board: Board
    turn: Color = Color.WHITE

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def empty(
        cls,
        geometry: BoardGeometry | None = None,
        turn: Color = Color.WHITE,
    ) -> Position:
        """The degraded "no game available" position (no kings, no pieces)."""
        return cls(Board(geometry), turn)

    @property
    def geometry(self) -> BoardGeometry:
        return self.board.geometry

    @property
    def is_playable(self) -> bool:
        """Exactly one king per side is on the board."""
        board = self.board
        return (
            board.count(Color.WHITE, PieceType.KING) == 1
            and board.count(Color.BLACK, PieceType.KING) == 1
        )

    def apply_move(self, from_sq: SquareLike, to_sq: SquareLike) -> Position:
        """Move the piece on *from_sq* to *to_sq* and pass the turn.

        Caller is responsible for legality check.
        """
        return Position(self.board.moved(from_sq, to_sq), self.turn.opposite)
