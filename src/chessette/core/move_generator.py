"""Pseudo-legal and legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache

from chessette.core.board import Board
from chessette.core.enums import Color, PieceType
from chessette.core.move import Move
from chessette.core.piece import Piece
from chessette.core.types import BoardGeometry, Square, SquareLike

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}
_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Lookup tables, built once per board size --------------------------------


@lru_cache(maxsize=None)
def _leap_targets(
    geometry: BoardGeometry,
    offsets: tuple[tuple[int, int], ...],
) -> Mapping[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in geometry.squares():
        moves: list[Square] = []
        for df, dr in offsets:
            to_sq = geometry.offset(sq, df, dr)
            if to_sq is not None:
                moves.append(to_sq)
        targets[sq] = tuple(moves)
    return targets


@lru_cache(maxsize=None)
def _rays(
    geometry: BoardGeometry,
    directions: tuple[tuple[int, int], ...],
) -> Mapping[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in geometry.squares():
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = geometry.offset(sq, df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = geometry.offset(to_sq, df, dr)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


class MoveGenerator:
    """Generates moves for the pieces of a :class:`Board`.

    The generator never mutates the board it was created for; every candidate
    move is simulated on an independent copy.
    """

    __slots__ = ("_board", "_geometry")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._geometry = board.geometry

    # -- Legal moves (public) ----------------------------------------------

    def legal_targets(self, square: SquareLike) -> list[Square]:
        """Destinations of the piece on *square* that pass every legality rule.

        A candidate is dropped when, on the simulated board, the kings end up
        adjacent (or one was captured), the mover's king is attacked, or a
        moving king stands on an attacked square.
        """
        from_sq = self._geometry.resolve(square)
        if from_sq is None:
            return []
        piece = self._board[from_sq]
        if piece is None:
            return []

        opponent = piece.color.opposite
        legal: list[Square] = []
        for to_sq in self.pseudo_legal_targets(from_sq):
            simulated = self._board.moved(from_sq, to_sq)
            if not simulated.kings_separated():
                continue
            sim_gen = MoveGenerator(simulated)
            if sim_gen.is_in_check(piece.color):
                continue
            if piece.is_king and sim_gen.is_square_attacked(to_sq, opponent):
                continue
            legal.append(to_sq)
        return legal

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*."""
        moves: list[Move] = []
        for from_sq, piece in self._board.items():
            if piece.color != color:
                continue
            for to_sq in self.legal_targets(from_sq):
                moves.append(Move(from_sq, to_sq, piece))
        return moves

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        for from_sq, piece in self._board.items():
            if piece.color != color:
                continue
            for to_sq in self.pseudo_legal_targets(from_sq):
                moves.append(Move(from_sq, to_sq, piece))
        return moves

    # -- Pseudo-legal moves ------------------------------------------------

    def pseudo_legal_targets(self, square: SquareLike) -> list[Square]:
        """Destinations obeying movement geometry and occupancy only."""
        sq = self._geometry.resolve(square)
        if sq is None:
            return []
        piece = self._board[sq]
        if piece is None:
            return []

        targets: list[Square] = []
        if piece.piece_type == PieceType.KING:
            self._gen_leaper(sq, piece, KING_OFFSETS, targets)
        elif piece.piece_type == PieceType.KNIGHT:
            self._gen_leaper(sq, piece, KNIGHT_OFFSETS, targets)
        else:
            self._gen_sliding(sq, piece, _SLIDER_DIRS[piece.piece_type], targets)
        return targets

    # -- Attack detection (public) -----------------------------------------

    def attacked_squares(self, square: SquareLike) -> list[Square]:
        """Squares attacked by the piece on *square* (raw occupancy).

        Unlike :meth:`pseudo_legal_targets`, squares held by the attacker's own
        side are included: a slider attacks up to and including its first
        blocker of either color.
        """
        sq = self._geometry.resolve(square)
        if sq is None:
            return []
        piece = self._board[sq]
        if piece is None:
            return []

        if piece.piece_type == PieceType.KING:
            return list(_leap_targets(self._geometry, KING_OFFSETS)[sq])
        if piece.piece_type == PieceType.KNIGHT:
            return list(_leap_targets(self._geometry, KNIGHT_OFFSETS)[sq])

        board = self._board
        attacked: list[Square] = []
        for ray in _rays(self._geometry, _SLIDER_DIRS[piece.piece_type])[sq]:
            for to_sq in ray:
                attacked.append(to_sq)
                if board[to_sq] is not None:
                    break
        return attacked

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?  False without a king."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, square: SquareLike, by_color: Color) -> bool:
        """Is *square* attacked by any piece of *by_color*?"""
        sq = self._geometry.resolve(square)
        if sq is None:
            return False
        board = self._board
        geometry = self._geometry

        for from_sq in _leap_targets(geometry, KNIGHT_OFFSETS)[sq]:
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.KNIGHT
            ):
                return True

        for from_sq in _leap_targets(geometry, KING_OFFSETS)[sq]:
            piece = board[from_sq]
            if piece is not None and piece.color == by_color and piece.is_king:
                return True

        diagonal_rays = _rays(geometry, BISHOP_DIRS)[sq]
        if self._ray_hits(diagonal_rays, by_color, _DIAGONAL_SLIDERS):
            return True
        orthogonal_rays = _rays(geometry, ROOK_DIRS)[sq]
        return self._ray_hits(orthogonal_rays, by_color, _ORTHOGONAL_SLIDERS)

    # -- Piece-specific generators (private) -------------------------------

    def _ray_hits(
        self,
        rays: tuple[tuple[Square, ...], ...],
        by_color: Color,
        slider_types: tuple[PieceType, ...],
    ) -> bool:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                piece = board[to_sq]
                if piece is None:
                    continue
                if piece.color == by_color and piece.piece_type in slider_types:
                    return True
                break
        return False

    def _gen_leaper(
        self,
        sq: Square,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        targets: list[Square],
    ) -> None:
        board = self._board
        for to_sq in _leap_targets(self._geometry, offsets)[sq]:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                targets.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        targets: list[Square],
    ) -> None:
        board = self._board
        for ray in _rays(self._geometry, directions)[sq]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.color != piece.color:
                    targets.append(to_sq)
                break
