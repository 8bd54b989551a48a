"""GameController: the central orchestrator of a game.

Coordinates: GameConfig, the position generator, GameState, MoveGenerator.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from chessette.core.enums import GameResult, GameStatus
from chessette.core.generator import generate_starting_position
from chessette.core.move import Move
from chessette.core.position import Position
from chessette.core.types import Square, SquareLike
from chessette.game.config import GameConfig
from chessette.game.interfaces import GamePhase, IGameController
from chessette.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameState"], None]
GameOverCallback = Callable[[GameStatus, GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
GenerationFailedCallback = Callable[[GameConfig], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_generation_failed: list[GenerationFailedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a game: generates the start, validates moves, switches
    turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_config", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._config = GameConfig()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._config

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        position: Position | None = None,
    ) -> bool:
        if config is not None:
            self._config = config
        cfg = self._config

        if position is None:
            position = generate_starting_position(
                cfg.pieces,
                geometry=cfg.geometry,
                turn=cfg.turn,
                max_attempts=cfg.max_attempts,
                allow_starting_check=cfg.allow_starting_check,
                rng=rng,
            )
        self._state = GameState()
        self._state.setup(position)

        if self._state.phase == GamePhase.UNAVAILABLE:
            _LOGGER.warning("Could not generate a valid position for %r", cfg)
            self._emit_phase(GamePhase.UNAVAILABLE)
            for cb in self.events.on_generation_failed:
                cb(cfg)
            return False

        _LOGGER.info("New game %r, %s to move", cfg, position.turn)
        if self._state.is_game_over:
            self._emit_game_over()
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    def legal_moves(self, square: SquareLike) -> list[Square]:
        if not self._state.accepts_moves:
            return []
        return self._state.legal_targets(square)

    def submit_move(self, from_sq: SquareLike, to_sq: SquareLike) -> bool:
        if not self._state.accepts_moves:
            return False

        # Validate legality
        geometry = self._state.position.geometry
        dst = geometry.resolve(to_sq)
        if dst is None or dst not in self._state.legal_targets(from_sq):
            _LOGGER.debug("Rejected move %r -> %r", from_sq, to_sq)
            return False

        move = self._state.apply_move(from_sq, dst)

        # Notify listeners
        self._emit_move(move)
        if self._state.is_game_over:
            self._emit_game_over()
        return True

    def classify(self) -> GameStatus:
        return self._state.status

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_game_over(self) -> None:
        status = self._state.status
        result = self._state.result
        _LOGGER.info("Game over: %s (%s)", status, result.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(status, result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
