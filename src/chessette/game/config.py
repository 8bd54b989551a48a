"""New-game configuration and the built-in piece loadouts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from chessette.core.enums import Color, PieceType
from chessette.core.generator import DEFAULT_MAX_ATTEMPTS
from chessette.core.piece import Piece, PieceLike
from chessette.core.types import BoardGeometry

_W_ROOK = Piece(Color.WHITE, PieceType.ROOK)
_B_BISHOP = Piece(Color.BLACK, PieceType.BISHOP)
_W_KNIGHT = Piece(Color.WHITE, PieceType.KNIGHT)
_B_QUEEN = Piece(Color.BLACK, PieceType.QUEEN)

# (board size, extra pieces per side) -> extra pieces besides the kings.
LOADOUTS: dict[tuple[int, int], tuple[Piece, ...]] = {
    (4, 1): (_W_ROOK, _B_BISHOP),
    (5, 2): (_W_ROOK, _B_BISHOP, _W_KNIGHT, _B_QUEEN),
    (5, 3): (_W_ROOK, _B_BISHOP, _W_KNIGHT, _B_QUEEN, _W_ROOK, _B_BISHOP),
}


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable new-game definition.

    Args:
        board_size: Side length of the board (4 or 5).
        pieces: Extra pieces placed besides the two kings.
        turn: Side to move first.
        max_attempts: Generator attempt budget.
        allow_starting_check: Accept starting positions with a side in check.
    """

    board_size: int = 4
    pieces: tuple[Piece, ...] = field(default=LOADOUTS[(4, 1)])
    turn: Color = Color.WHITE
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    allow_starting_check: bool = False

    def __post_init__(self) -> None:
        # Validates the size eagerly.
        BoardGeometry(self.board_size)
        pieces = tuple(Piece.coerce(p) for p in self.pieces)
        object.__setattr__(self, "pieces", pieces)
        object.__setattr__(self, "turn", Color.from_token(self.turn))
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive: {self.max_attempts!r}")

    @property
    def geometry(self) -> BoardGeometry:
        return BoardGeometry(self.board_size)

    # Presets
    @classmethod
    def preset(
        cls,
        board_size: int = 4,
        pieces_per_side: int | None = None,
    ) -> GameConfig:
        """Built-in loadout for *board_size*.

        4x4 boards get one extra piece per side; 5x5 boards get two (default)
        or three.
        """
        if pieces_per_side is None:
            pieces_per_side = 1 if board_size == 4 else 2
        try:
            pieces = LOADOUTS[(board_size, pieces_per_side)]
        except KeyError:
            raise ValueError(
                f"No loadout for a {board_size}x{board_size} board "
                f"with {pieces_per_side} piece(s) per side"
            ) from None
        return cls(board_size=board_size, pieces=pieces)

    @classmethod
    def custom(
        cls,
        board_size: int,
        pieces: Iterable[PieceLike],
        turn: Color | str = Color.WHITE,
    ) -> GameConfig:
        return cls(board_size=board_size, pieces=tuple(pieces), turn=turn)

    def __repr__(self) -> str:
        loadout = " ".join(str(p) for p in self.pieces) or "-"
        return f"GameConfig({self.board_size}x{self.board_size}, {loadout}, {self.turn})"
