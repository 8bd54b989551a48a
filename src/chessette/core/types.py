"""Square value object and the board-size context object.

Squares are ``(file_index, rank)`` pairs: ``file_index`` counts from 0 (file
``A``) and ``rank`` counts from 1, so ``Square(1, 3)`` is ``"B3"``.  Whether a
square exists depends on the :class:`BoardGeometry` it is used with; lookups
that fall off the board return ``None`` instead of raising, which lets ray and
leap code stop cleanly at the edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias

SUPPORTED_SIZES: Final = (4, 5)
_FILE_LETTERS: Final = "ABCDE"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    file_index: int
    rank: int

    @property
    def name(self) -> str:
        """Text form, e.g. ``Square(2, 2)`` → ``'C2'``."""
        return f"{chr(ord('A') + self.file_index)}{self.rank}"

    def __str__(self) -> str:
        return self.name


SquareLike: TypeAlias = Square | str


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Board-size context shared by boards, generators and parsers.

    Args:
        size: Side length of the square board (4 or 5).
    """

    size: int = 4

    def __post_init__(self) -> None:
        if self.size not in SUPPORTED_SIZES:
            raise ValueError(
                f"Unsupported board size: {self.size!r} (expected one of {SUPPORTED_SIZES})"
            )

    # -- Coordinate tables ----------------------------------------------------

    @property
    def files(self) -> str:
        """File letters in order, e.g. ``'ABCD'``."""
        return _FILE_LETTERS[: self.size]

    @property
    def ranks(self) -> range:
        return range(1, self.size + 1)

    def squares(self) -> tuple[Square, ...]:
        """Every square of the board, rank 1 first."""
        return tuple(
            Square(file_index, rank)
            for rank in self.ranks
            for file_index in range(self.size)
        )

    # -- Bounds / construction ------------------------------------------------

    def contains(self, square: Square) -> bool:
        return 0 <= square.file_index < self.size and 1 <= square.rank <= self.size

    def square(self, file_index: int, rank: int) -> Square | None:
        """Square at *file_index*/*rank*, or ``None`` when off the board."""
        if 0 <= file_index < self.size and 1 <= rank <= self.size:
            return Square(file_index, rank)
        return None

    def to_text(self, file_index: int, rank: int) -> str | None:
        sq = self.square(file_index, rank)
        return sq.name if sq is not None else None

    def offset(self, square: Square, df: int, dr: int) -> Square | None:
        """Square reached by stepping (*df*, *dr*) from *square*."""
        return self.square(square.file_index + df, square.rank + dr)

    # -- Parsing --------------------------------------------------------------

    def parse(self, text: object) -> Square | None:
        """Parse ``'b3'`` / ``' B3 '`` into a :class:`Square`.

        Returns ``None`` for anything that is not a square of this board.
        """
        if not isinstance(text, str):
            return None
        s = text.strip().upper()
        if len(s) < 2:
            return None
        file_index = self.files.find(s[0])
        if file_index < 0:
            return None
        digits = s[1:]
        if not (digits.isascii() and digits.isdigit()):
            return None
        return self.square(file_index, int(digits))

    def resolve(self, value: SquareLike | None) -> Square | None:
        """Accept either a :class:`Square` or its text form."""
        if isinstance(value, Square):
            return value if self.contains(value) else None
        return self.parse(value)

    def adjacent(self, a: SquareLike, b: SquareLike) -> bool:
        """Whether *a* and *b* are exactly one king step apart."""
        sa = self.resolve(a)
        sb = self.resolve(b)
        if sa is None or sb is None:
            return False
        return chebyshev_distance(sa, sb) == 1


def chebyshev_distance(a: Square, b: Square) -> int:
    """King-step distance between two squares."""
    return max(abs(a.file_index - b.file_index), abs(a.rank - b.rank))
