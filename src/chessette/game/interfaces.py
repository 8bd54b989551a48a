"""Abstract interfaces for the game layer.

Front ends (the Qt bridge, tests, scripts) depend on :class:`IGameController`
rather than on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random

    from chessette.core.enums import GameStatus
    from chessette.core.position import Position
    from chessette.core.types import Square, SquareLike
    from chessette.game.config import GameConfig


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()
    UNAVAILABLE = auto()  # generator could not produce a position


# ── Controller contract ──────────────────────────────────────────────────────


class IGameController(ABC):
    """Turn-by-turn driver of a single game."""

    @abstractmethod
    def new_game(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        position: Position | None = None,
    ) -> bool:
        """Start a fresh game; False when no playable position is available."""

    @abstractmethod
    def legal_moves(self, square: SquareLike) -> list[Square]:
        """Legal destinations for the side-to-move piece on *square*."""

    @abstractmethod
    def submit_move(self, from_sq: SquareLike, to_sq: SquareLike) -> bool:
        """Validate and play a move; False if it was rejected."""

    @abstractmethod
    def classify(self) -> GameStatus:
        """Status of the current position for the side to move."""
