"""Board - piece placement on a 4x4 or 5x5 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessette.core.enums import Color, PieceType
from chessette.core.piece import Piece, PieceLike
from chessette.core.types import BoardGeometry, Square, SquareLike, chebyshev_distance


class Board:
    """Mutable square → piece mapping bound to one :class:`BoardGeometry`.

    Writes normalize the piece through :meth:`Piece.coerce`, so callers may
    pass loose ``("king", "w")`` style descriptions.  Simulations must work
    on :meth:`copy` / :meth:`moved`, never on the live board.
    """

    __slots__ = ("_geometry", "_squares", "_king_squares")

    def __init__(self, geometry: BoardGeometry | None = None) -> None:
        self._geometry = geometry if geometry is not None else BoardGeometry()
        self._squares: dict[Square, Piece] = {}
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    @property
    def geometry(self) -> BoardGeometry:
        return self._geometry

    def _require(self, square: SquareLike) -> Square:
        sq = self._geometry.resolve(square)
        if sq is None:
            size = self._geometry.size
            raise ValueError(f"Square not on a {size}x{size} board: {square!r}")
        return sq

    # -- Element access -----------------------------------------------------

    def __getitem__(self, square: SquareLike) -> Piece | None:
        sq = self._geometry.resolve(square)
        if sq is None:
            return None
        return self._squares.get(sq)

    def __setitem__(self, square: SquareLike, piece: PieceLike | None) -> None:
        sq = self._require(square)
        old_piece = self._squares.pop(sq, None)
        if old_piece is not None and old_piece.is_king:
            idx = int(old_piece.color)
            if self._king_squares[idx] == sq:
                # Another king of that color may still stand elsewhere.
                self._king_squares[idx] = self._find_king(old_piece.color)

        if piece is None:
            return

        new_piece = Piece.coerce(piece)
        self._squares[sq] = new_piece
        if new_piece.is_king:
            self._king_squares[int(new_piece.color)] = sq

    def _find_king(self, color: Color) -> Square | None:
        for sq, piece in self._squares.items():
            if piece.is_king and piece.color == color:
                return sq
        return None

    def get(self, square: SquareLike) -> Piece | None:
        return self[square]

    def set(self, square: SquareLike, piece: PieceLike | None) -> None:
        self[square] = piece

    def is_empty(self, square: SquareLike) -> bool:
        return self[square] is None

    # -- Query helpers ------------------------------------------------------

    def items(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, in board order."""
        for sq in sorted(self._squares, key=lambda s: (s.rank, s.file_index)):
            yield sq, self._squares[sq]

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.items() if piece.color == color]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return sum(
            1
            for piece in self._squares.values()
            if piece.color == color and piece.piece_type == piece_type
        )

    def king_square(self, color: Color) -> Square | None:
        """The king square for *color*, or ``None`` if that king is missing."""
        return self._king_squares[int(color)]

    def kings_separated(self) -> bool:
        """Both kings present and at least two king steps apart."""
        white_king = self._king_squares[int(Color.WHITE)]
        black_king = self._king_squares[int(Color.BLACK)]
        if white_king is None or black_king is None:
            return False
        return chebyshev_distance(white_king, black_king) > 1

    def __len__(self) -> int:
        return len(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._geometry)
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    clone = copy

    def moved(self, from_sq: SquareLike, to_sq: SquareLike) -> Board:
        """Copy of this board with the piece on *from_sq* lifted onto *to_sq*.

        Whatever stood on *to_sq* is captured.  No legality checks are made.
        """
        src = self._require(from_sq)
        dst = self._require(to_sq)
        piece = self._squares.get(src)
        if piece is None:
            raise ValueError(f"No piece on {src}")
        b = self.copy()
        b[src] = None
        b[dst] = piece
        return b

    def clear(self) -> None:
        self._squares = {}
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_placement(
        cls,
        placement: Mapping[SquareLike, PieceLike],
        geometry: BoardGeometry | None = None,
    ) -> Board:
        """Build a board from ``{"A1": ("king", "white"), ...}``."""
        b = cls(geometry)
        for square, piece in placement.items():
            b[square] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._geometry == other._geometry and self._squares == other._squares

    def __repr__(self) -> str:
        size = self._geometry.size
        rows: list[str] = []
        for rank in range(size, 0, -1):
            row = []
            for file_index in range(size):
                p = self._squares.get(Square(file_index, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  " + " ".join(self._geometry.files))
        return "\n".join(rows)
