# tests/conftest.py
from __future__ import annotations

from typing import Callable, Sequence

import pytest

from falling_blocks.game import Board, GameConfig, ScriptedPieceSupplier, TetrominoType


@pytest.fixture
def make_board() -> Callable[..., Board]:
    def _make(kinds: Sequence[TetrominoType] = (TetrominoType.O,), **config) -> Board:
        return Board(GameConfig(**config), supplier=ScriptedPieceSupplier(kinds))

    return _make
