from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .matrix import compact_rows, deep_copy
from .rules import ScoringRules


@dataclass(frozen=True, eq=False)
class LineClearResult:
    lines_removed: int
    grid: np.ndarray
    score_bonus: int


class GameGrid:
    """Fixed-size grid of settled blocks.

    0 is an empty cell, positive integers are the colour ids of settled
    pieces. Row 0 is the top of the board.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.cells = np.zeros((self.height, self.width), dtype=np.int8)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, x: int, y: int, shape: np.ndarray) -> bool:
        rows, cols = np.nonzero(shape)
        ys = rows + y
        xs = cols + x
        if np.any((xs < 0) | (xs >= self.width) | (ys < 0) | (ys >= self.height)):
            return True
        return bool(np.any(self.cells[ys, xs] != 0))

    def merge(self, shape: np.ndarray, x: int, y: int) -> None:
        for dy, dx in zip(*np.nonzero(shape)):
            bx, by = x + int(dx), y + int(dy)
            if self.is_inside(bx, by):
                self.cells[by, bx] = shape[dy, dx]

    def clear_full_rows(self, rules: Optional[ScoringRules] = None) -> LineClearResult:
        """Remove full rows and report the bonus. Does not touch any score."""
        rules = rules or ScoringRules()
        lines, new_cells = compact_rows(self.cells)
        self.cells = new_cells
        snapshot = deep_copy(new_cells)
        snapshot.setflags(write=False)
        return LineClearResult(
            lines_removed=lines,
            grid=snapshot,
            score_bonus=rules.bonus_for_lines(lines),
        )

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()

    def visible_state(self, hidden_rows: int) -> np.ndarray:
        return self.cells[hidden_rows:].copy()
