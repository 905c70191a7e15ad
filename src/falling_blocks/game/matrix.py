"""Stateless helpers over 2-D integer matrices (board grids and piece shapes)."""

from __future__ import annotations

from typing import Tuple

import numpy as np


def deep_copy(matrix: np.ndarray) -> np.ndarray:
    return np.array(matrix, copy=True)


def overlay(grid: np.ndarray, shape: np.ndarray, x: int, y: int) -> np.ndarray:
    """Return a copy of `grid` with the non-zero cells of `shape` written at (x, y).

    Shape cells falling outside the grid are skipped. `grid` is left untouched.
    """
    out = deep_copy(grid)
    height, width = out.shape
    rows, cols = np.nonzero(shape)
    ys = rows + y
    xs = cols + x
    inside = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
    out[ys[inside], xs[inside]] = shape[rows[inside], cols[inside]]
    return out


def is_row_full(row: np.ndarray) -> bool:
    return bool(np.all(row != 0))


def full_rows(grid: np.ndarray) -> np.ndarray:
    return np.where(np.all(grid != 0, axis=1))[0]


def compact_rows(grid: np.ndarray) -> Tuple[int, np.ndarray]:
    """Drop every full row and settle the rest at the bottom.

    Returns the number of removed rows and a new grid of the same shape whose
    vacated top rows are zero-filled. Surviving rows keep their order.
    """
    removed = full_rows(grid)
    if removed.size == 0:
        return 0, deep_copy(grid)
    num = int(removed.size)
    kept = np.delete(grid, removed, axis=0)
    new_rows = np.zeros((num, grid.shape[1]), dtype=grid.dtype)
    return num, np.vstack((new_rows, kept))
