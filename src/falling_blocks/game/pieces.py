from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


# Every state is a 4x4 grid; cell values are the kind's colour id.
ROTATION_STATES: Dict[TetrominoType, Tuple[Shape, ...]] = {
    TetrominoType.I: (
        _frozen([[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]]),
        _frozen([[0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0]]),
    ),
    TetrominoType.J: (
        _frozen([[0, 0, 0, 0], [2, 2, 2, 0], [0, 0, 2, 0], [0, 0, 0, 0]]),
        _frozen([[0, 0, 0, 0], [0, 2, 2, 0], [0, 2, 0, 0], [0, 2, 0, 0]]),
        _frozen([[0, 0, 0, 0], [0, 2, 0, 0], [0, 2, 2, 2], [0, 0, 0, 0]]),
        _frozen([[0, 0, 2, 0], [0, 0, 2, 0], [0, 2, 2, 0], [0, 0, 0, 0]]),
    ),
    TetrominoType.L: (
        _frozen([[0, 0, 0, 0], [0, 3, 3, 3], [0, 3, 0, 0], [0, 0, 0, 0]]),
        _frozen([[0, 0, 0, 0], [0, 3, 3, 0], [0, 0, 3, 0], [0, 0, 3, 0]]),
        _frozen([[0, 0, 0, 0], [0, 0, 3, 0], [3, 3, 3, 0], [0, 0, 0, 0]]),
        _frozen([[0, 3, 0, 0], [0, 3, 0, 0], [0, 3, 3, 0], [0, 0, 0, 0]]),
    ),
    TetrominoType.O: (
        _frozen([[0, 0, 0, 0], [0, 4, 4, 0], [0, 4, 4, 0], [0, 0, 0, 0]]),
    ),
    TetrominoType.S: (
        _frozen([[0, 0, 0, 0], [0, 5, 5, 0], [5, 5, 0, 0], [0, 0, 0, 0]]),
        _frozen([[5, 0, 0, 0], [5, 5, 0, 0], [0, 5, 0, 0], [0, 0, 0, 0]]),
    ),
    TetrominoType.T: (
        _frozen([[0, 0, 0, 0], [6, 6, 6, 0], [0, 6, 0, 0], [0, 0, 0, 0]]),
        _frozen([[0, 6, 0, 0], [6, 6, 0, 0], [0, 6, 0, 0], [0, 0, 0, 0]]),
        _frozen([[0, 6, 0, 0], [6, 6, 6, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
        _frozen([[0, 6, 0, 0], [0, 6, 6, 0], [0, 6, 0, 0], [0, 0, 0, 0]]),
    ),
    TetrominoType.Z: (
        _frozen([[0, 0, 0, 0], [7, 7, 0, 0], [0, 7, 7, 0], [0, 0, 0, 0]]),
        _frozen([[0, 0, 7, 0], [0, 7, 7, 0], [0, 7, 0, 0], [0, 0, 0, 0]]),
    ),
}


def rotation_states(kind: TetrominoType) -> List[Shape]:
    """Writable copies of every rotation state of `kind`, in rotation order."""
    return [state.copy() for state in ROTATION_STATES[kind]]


@dataclass(frozen=True)
class Piece:
    kind: TetrominoType

    @property
    def state_count(self) -> int:
        return len(ROTATION_STATES[self.kind])

    def shape(self, rotation: int = 0) -> Shape:
        return ROTATION_STATES[self.kind][rotation % self.state_count].copy()


ALL_PIECES: Tuple[Piece, ...] = tuple(Piece(kind) for kind in TetrominoType)
