from __future__ import annotations

import random
from collections import deque
from typing import Deque, Iterable, Optional, Protocol, Sequence

from .pieces import ALL_PIECES, Piece, TetrominoType


class PieceSupplier(Protocol):
    def next_active(self) -> Piece:
        ...

    def peek_next(self) -> Piece:
        ...


class RandomPieceSupplier:
    """Uniform, independent draws with a one-piece lookahead.

    No bag fairness: the same kind may come up any number of times in a row.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)
        self._queue: Deque[Piece] = deque()
        self._queue.append(self._random_piece())
        self._queue.append(self._random_piece())

    def _random_piece(self) -> Piece:
        return self.rng.choice(ALL_PIECES)

    def next_active(self) -> Piece:
        if len(self._queue) <= 1:
            self._queue.append(self._random_piece())
        return self._queue.popleft()

    def peek_next(self) -> Piece:
        return self._queue[0]


class ScriptedPieceSupplier:
    """Cycles through a fixed sequence of kinds. Handy for replays and tests."""

    def __init__(self, kinds: Iterable[TetrominoType]) -> None:
        self._kinds: Sequence[TetrominoType] = tuple(TetrominoType(k) for k in kinds)
        if not self._kinds:
            raise ValueError("ScriptedPieceSupplier needs at least one kind")
        self._cursor = 0

    def next_active(self) -> Piece:
        kind = self._kinds[self._cursor % len(self._kinds)]
        self._cursor += 1
        return Piece(kind)

    def peek_next(self) -> Piece:
        return Piece(self._kinds[self._cursor % len(self._kinds)])
