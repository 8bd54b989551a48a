"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessette.core.piece import Piece
from chessette.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move of *piece*."""

    from_sq: Square
    to_sq: Square
    piece: Piece

    def __str__(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}"
