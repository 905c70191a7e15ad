from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


def _frozen_copy(matrix: Optional[np.ndarray]) -> Optional[np.ndarray]:
    if matrix is None:
        return None
    out = np.array(matrix, copy=True)
    out.setflags(write=False)
    return out


@dataclass(frozen=True, eq=False)
class ViewSnapshot:
    """Everything a renderer needs for one frame.

    Arrays are private read-only copies, so holding on to a snapshot never
    exposes or pins the board's own state. `ghost_shape` and `ghost_position`
    are None when the piece is already resting (ghost and piece coincide).
    """

    shape: np.ndarray
    x: int
    y: int
    ghost_shape: Optional[np.ndarray] = None
    ghost_position: Optional[Tuple[int, int]] = None
    next_shape: Optional[np.ndarray] = None
    hold_shape: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", _frozen_copy(self.shape))
        object.__setattr__(self, "ghost_shape", _frozen_copy(self.ghost_shape))
        object.__setattr__(self, "next_shape", _frozen_copy(self.next_shape))
        object.__setattr__(self, "hold_shape", _frozen_copy(self.hold_shape))

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y
