"""Qt bridge exposing a :class:`GameController` through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessette.core.enums import GameResult, GameStatus
from chessette.core.move import Move
from chessette.game.config import GameConfig
from chessette.game.controller import GameController
from chessette.game.state import GameState


class GameBridge(QObject):
    """GUI-thread adapter between a board widget and the game controller.

    Squares travel as text (``"C2"``) so that QML and widget front ends can
    use the bridge without importing engine types.
    """

    position_changed = pyqtSignal(object)
    legal_moves_ready = pyqtSignal(str, list)
    move_applied = pyqtSignal(str, str)
    move_rejected = pyqtSignal(str, str)
    status_changed = pyqtSignal(str)
    game_over = pyqtSignal(str)
    generation_failed = pyqtSignal()

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self._starting = False
        self._pending_game_over: str | None = None
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_game_over.append(self._on_game_over)
        events.on_generation_failed.append(self._on_generation_failed)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(int, int)
    def start_game(self, board_size: int, pieces_per_side: int) -> None:
        """Start a new game with the built-in loadout for *board_size*."""
        try:
            config = GameConfig.preset(board_size, pieces_per_side)
        except ValueError:
            self.generation_failed.emit()
            return
        # A terminal start is reported only after the board is out.
        self._starting = True
        self._pending_game_over = None
        try:
            started = self._controller.new_game(config)
        finally:
            self._starting = False
        if started:
            self.position_changed.emit(self._controller.state.position)
            self.status_changed.emit(str(self._controller.classify()))
        if self._pending_game_over is not None:
            status, self._pending_game_over = self._pending_game_over, None
            self.game_over.emit(status)

    @pyqtSlot(str)
    def request_legal_moves(self, square: str) -> None:
        targets = self._controller.legal_moves(square)
        self.legal_moves_ready.emit(square, [sq.name for sq in targets])

    @pyqtSlot(str, str)
    def submit_move(self, from_sq: str, to_sq: str) -> None:
        if not self._controller.submit_move(from_sq, to_sq):
            self.move_rejected.emit(from_sq, to_sq)

    # -- Controller callbacks ------------------------------------------------

    def _on_move(self, move: Move, state: GameState) -> None:
        self.move_applied.emit(move.from_sq.name, move.to_sq.name)
        self.position_changed.emit(state.position)
        self.status_changed.emit(str(state.status))

    def _on_game_over(self, status: GameStatus, result: GameResult) -> None:
        del result
        if self._starting:
            self._pending_game_over = str(status)
            return
        self.game_over.emit(str(status))

    def _on_generation_failed(self, config: GameConfig) -> None:
        del config
        self.generation_failed.emit()
