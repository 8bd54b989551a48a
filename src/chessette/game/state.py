"""Game state machine: tracks the live position, phase and move counter."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessette.core.enums import Color, GameResult, GameStatus
from chessette.core.move import Move
from chessette.core.move_generator import MoveGenerator
from chessette.core.position import Position
from chessette.core.rules import Rules
from chessette.core.types import Square, SquareLike
from chessette.game.interfaces import GamePhase


@dataclass
class GameState:
    """Manages game lifecycle: position, phase, status and result.

    This is a pure data/logic class, no threading, no UI.
    """

    position: Position = field(default_factory=Position.empty, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: GameStatus = field(default=GameStatus.ONGOING, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position) -> None:
        """Initialise (or reset) the game from a generated position."""
        self.position = position
        self.move_count = 0
        self.result = GameResult.IN_PROGRESS
        self.status = GameStatus.ONGOING
        if not position.is_playable:
            self.phase = GamePhase.UNAVAILABLE
            return
        self.phase = GamePhase.AWAITING_MOVE
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: SquareLike, to_sq: SquareLike) -> Move:
        """Apply a move and return it.

        Caller is responsible for legality check.
        """
        board = self.position.board
        src = board.geometry.resolve(from_sq)
        dst = board.geometry.resolve(to_sq)
        piece = board[src] if src is not None else None
        if src is None or dst is None or piece is None:
            raise ValueError(f"Cannot move {from_sq!r} -> {to_sq!r}")

        self.position = self.position.apply_move(src, dst)
        self.move_count += 1
        self._check_game_over()
        return Move(src, dst, piece)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.turn

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def accepts_moves(self) -> bool:
        return self.phase == GamePhase.AWAITING_MOVE

    def legal_targets(self, square: SquareLike) -> list[Square]:
        """Legal destinations of the side-to-move piece on *square*."""
        piece = self.position.board[square]
        if piece is None or piece.color != self.side_to_move:
            return []
        return MoveGenerator(self.position.board).legal_targets(square)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return Rules.all_legal_moves(self.position.board, self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        self.status = Rules.status(self.position.board, self.side_to_move)
        self.result = Rules.result_for(self.status, self.side_to_move)
        if self.status.is_terminal:
            self.phase = GamePhase.GAME_OVER
