"""Piece value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from chessette.core.enums import Color, PieceType

_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece."""

    color: Color
    piece_type: PieceType

    # ── Normalisation ────────────────────────────────────────────────────

    @classmethod
    def of(cls, piece_type: PieceType | str, color: Color | str) -> Piece:
        """Build a piece from loose tokens, e.g. ``Piece.of("k", "White")``."""
        return cls(Color.from_token(color), PieceType.from_token(piece_type))

    @classmethod
    def coerce(cls, value: object) -> Piece:
        """Normalize any accepted piece description into a :class:`Piece`.

        Accepts a :class:`Piece`, a ``(type, color)`` pair or a mapping with
        ``type`` and ``color`` keys.
        """
        if isinstance(value, Piece):
            return value
        if isinstance(value, Mapping):
            try:
                return cls.of(value["type"], value["color"])
            except KeyError:
                raise ValueError(f"Invalid piece description: {value!r}") from None
        if isinstance(value, tuple) and len(value) == 2:
            return cls.of(value[0], value[1])
        raise ValueError(f"Invalid piece description: {value!r}")

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        char = _CHARS[self.piece_type]
        return char if self.color == Color.WHITE else char.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING


PieceLike: TypeAlias = Piece | tuple[PieceType | str, Color | str] | Mapping[str, object]
