"""Core enumerations for the king-separation mini chess domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum

# Token spellings accepted at ingestion boundaries (case-insensitive).
_COLOR_TOKENS: dict[str, int] = {
    "w": 0,
    "white": 0,
    "b": 1,
    "black": 1,
}

_PIECE_TYPE_TOKENS: dict[str, int] = {
    "n": 1,
    "knight": 1,
    "b": 2,
    "bishop": 2,
    "r": 3,
    "rook": 3,
    "q": 4,
    "queen": 4,
    "k": 5,
    "king": 5,
}


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @classmethod
    def from_token(cls, token: Color | str) -> Color:
        """Normalize ``"w"`` / ``"White"`` / :class:`Color` into a Color."""
        if isinstance(token, Color):
            return token
        try:
            return cls(_COLOR_TOKENS[str(token).strip().lower()])
        except KeyError:
            raise ValueError(f"Invalid color: {token!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece types of the variant ordered by conventional value (no pawns)."""

    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    @classmethod
    def from_token(cls, token: PieceType | str) -> PieceType:
        """Normalize ``"k"`` / ``"King"`` / :class:`PieceType` into a PieceType."""
        if isinstance(token, PieceType):
            return token
        try:
            return cls(_PIECE_TYPE_TOKENS[str(token).strip().lower()])
        except KeyError:
            raise ValueError(f"Invalid piece type: {token!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(StrEnum):
    """Classification of a position for the side to move."""

    ONGOING = "ongoing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
