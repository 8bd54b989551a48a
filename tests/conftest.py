"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Callable, Iterator, Mapping

import pytest

from chessette.core.board import Board
from chessette.core.piece import PieceLike
from chessette.core.types import BoardGeometry, SquareLike

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton Qt core application for bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so generated positions are reproducible."""
    return random.Random(20240611)


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Build a board from ``{"A1": ("king", "white"), ...}``."""

    def _make(placement: Mapping[SquareLike, PieceLike], size: int = 4) -> Board:
        return Board.from_placement(placement, BoardGeometry(size))

    return _make
