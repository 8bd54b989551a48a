"""Tests for GameConfig and the built-in loadouts."""

import pytest

from chessette.core.enums import Color, PieceType
from chessette.core.piece import Piece
from chessette.core.types import BoardGeometry
from chessette.game.config import LOADOUTS, GameConfig


class TestPresets:
    def test_default_is_4x4_loadout(self) -> None:
        cfg = GameConfig()
        assert cfg.board_size == 4
        assert cfg.pieces == LOADOUTS[(4, 1)]
        assert cfg.turn == Color.WHITE

    def test_small_board(self) -> None:
        cfg = GameConfig.preset(4)
        assert [str(p) for p in cfg.pieces] == ["R", "b"]

    def test_large_board_two_per_side(self) -> None:
        cfg = GameConfig.preset(5)
        assert [str(p) for p in cfg.pieces] == ["R", "b", "N", "q"]
        assert cfg.geometry == BoardGeometry(5)

    def test_large_board_three_per_side(self) -> None:
        cfg = GameConfig.preset(5, pieces_per_side=3)
        assert len(cfg.pieces) == 6
        white = [p for p in cfg.pieces if p.color == Color.WHITE]
        assert len(white) == 3

    @pytest.mark.parametrize(("size", "count"), [(4, 2), (5, 1), (5, 4), (6, 2)])
    def test_unknown_loadout(self, size: int, count: int) -> None:
        with pytest.raises(ValueError, match="No loadout"):
            GameConfig.preset(size, count)


class TestValidation:
    def test_custom_normalizes(self) -> None:
        cfg = GameConfig.custom(5, [("Queen", "w"), {"type": "n", "color": "b"}], turn="black")
        assert cfg.pieces == (
            Piece(Color.WHITE, PieceType.QUEEN),
            Piece(Color.BLACK, PieceType.KNIGHT),
        )
        assert cfg.turn == Color.BLACK

    def test_bad_size(self) -> None:
        with pytest.raises(ValueError, match="Unsupported board size"):
            GameConfig(board_size=8)

    def test_bad_budget(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            GameConfig(max_attempts=0)

    def test_repr(self) -> None:
        assert repr(GameConfig.preset(4)) == "GameConfig(4x4, R b, white)"
