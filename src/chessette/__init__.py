"""Rules engine for king-separation mini chess on 4x4 and 5x5 boards."""

from chessette.api import apply_move, classify, legal_moves, new_game

__version__ = "0.1.0"

__all__ = [
    "apply_move",
    "classify",
    "legal_moves",
    "new_game",
]
