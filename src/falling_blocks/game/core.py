from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..errors import ConfigError, NoActivePieceError
from .generator import PieceSupplier, RandomPieceSupplier
from .grid import GameGrid, LineClearResult
from .pieces import Piece, Shape
from .rotation import RotationTracker
from .rules import Score, ScoringRules
from .view import ViewSnapshot

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    width: int = 10
    height: int = 25
    # Top rows reserved for spawning; never drawn but part of collision.
    hidden_rows: int = 2
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"board dimensions must be positive, got {self.width}x{self.height}")
        if not 0 <= self.hidden_rows < self.height:
            raise ConfigError(f"hidden_rows must be in [0, {self.height}), got {self.hidden_rows}")


class Board:
    """Board engine: settled grid, the active piece, hold slot and score.

    The board is a passive state machine. A driver (see `GameController`)
    calls `spawn_piece`, the move/rotate operations and, whenever `move_down`
    fails, `merge_active_into_grid` + `clear_full_rows` + `spawn_piece`.
    Not thread-safe; calls must be serialised by the driver.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        supplier: Optional[PieceSupplier] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.supplier: PieceSupplier = supplier or RandomPieceSupplier(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.rotator = RotationTracker()
        self.score = Score()
        self.current_shape: Optional[Shape] = None
        self.current_x = 0
        self.current_y = 0
        self.next_preview: Optional[Shape] = None
        self.held_piece: Optional[Piece] = None
        self.hold_used = False

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def active_piece(self) -> Optional[Piece]:
        return self.rotator.piece

    @property
    def rotation_index(self) -> int:
        return self.rotator.rotation_index

    @property
    def position(self) -> Tuple[int, int]:
        return self.current_x, self.current_y

    def background(self) -> np.ndarray:
        return self.grid.clone_state()

    def _require_active(self) -> Shape:
        if self.current_shape is None:
            raise NoActivePieceError("no active piece; call spawn_piece() first")
        return self.current_shape

    def _spawn_x(self, shape: Shape) -> int:
        return self.width // 2 - shape.shape[1] // 2

    def collides(self, x: int, y: int, shape: Shape) -> bool:
        return self.grid.collides(x, y, shape)

    def spawn_piece(self) -> bool:
        """Make the supplier's next piece active. Returns True on game over."""
        piece = self.supplier.next_active()
        self.rotator.assign(piece)
        self.current_shape = self.rotator.current_shape()
        self.next_preview = self.supplier.peek_next().shape(0)
        self.current_x = self._spawn_x(self.current_shape)
        self.current_y = 0
        self.hold_used = False

        # Long pieces get one row of headroom: game over only when y and y - 1 are
        # both blocked. The offset stays at y = 0 even when only y - 1 is free.
        blocked_here = self.collides(self.current_x, self.current_y, self.current_shape)
        blocked_above = self.collides(self.current_x, self.current_y - 1, self.current_shape)
        if not (blocked_here and blocked_above):
            logger.debug("spawned %s at (%d, %d)", piece.kind.name, self.current_x, self.current_y)
            return False
        logger.info("spawn blocked for %s at x=%d: game over", piece.kind.name, self.current_x)
        return True

    def _shift(self, dx: int, dy: int) -> bool:
        shape = self._require_active()
        new_x = self.current_x + dx
        new_y = self.current_y + dy
        if self.collides(new_x, new_y, shape):
            return False
        self.current_x = new_x
        self.current_y = new_y
        return True

    def move_down(self) -> bool:
        return self._shift(0, 1)

    def move_left(self) -> bool:
        return self._shift(-1, 0)

    def move_right(self) -> bool:
        return self._shift(1, 0)

    def rotate(self) -> bool:
        self._require_active()
        preview = self.rotator.preview_next_rotation()
        # No wall kicks: the rotated shape must fit at the current offset.
        if self.collides(self.current_x, self.current_y, preview.shape):
            return False
        self.rotator.commit_rotation(preview.index)
        self.current_shape = preview.shape
        return True

    def hard_drop(self) -> int:
        """Move the active piece straight to its resting row.

        Returns the number of rows travelled. Settling is left to the caller.
        """
        rows = 0
        while self.move_down():
            rows += 1
        return rows

    def merge_active_into_grid(self) -> None:
        # Call exactly once per settle; a second call would write the cells again.
        shape = self._require_active()
        self.grid.merge(shape, self.current_x, self.current_y)
        logger.debug("locked %s at (%d, %d)", self.rotator.piece.kind.name, self.current_x, self.current_y)

    def clear_full_rows(self) -> LineClearResult:
        result = self.grid.clear_full_rows(self.rules)
        if result.lines_removed:
            logger.debug("cleared %d row(s), bonus %d", result.lines_removed, result.score_bonus)
        return result

    def hold_swap(self) -> bool:
        """Stash the active piece or swap it with the held one.

        At most once between spawns. Returns True only when the replacement
        spawn (empty hold slot) is blocked.
        """
        self._require_active()
        if self.hold_used:
            return False

        game_over = False
        active = self.rotator.piece
        if self.held_piece is None:
            self.held_piece = active
            game_over = self.spawn_piece()
        else:
            self.held_piece, swapped_in = active, self.held_piece
            self.rotator.assign(swapped_in)
            self.current_shape = self.rotator.current_shape()
            # Straight to the spawn offset; unlike spawn_piece() there is no collision check.
            self.current_x = self._spawn_x(self.current_shape)
            self.current_y = 0

        self.hold_used = True
        return game_over

    def ghost_position(self) -> Optional[Tuple[int, int]]:
        shape = self._require_active()
        ghost_y = self.current_y
        while not self.collides(self.current_x, ghost_y + 1, shape):
            ghost_y += 1
        if ghost_y == self.current_y:
            return None
        return self.current_x, ghost_y

    def snapshot(self) -> ViewSnapshot:
        shape = self._require_active()
        ghost = self.ghost_position()
        return ViewSnapshot(
            shape=shape,
            x=self.current_x,
            y=self.current_y,
            ghost_shape=shape if ghost is not None else None,
            ghost_position=ghost,
            next_shape=self.next_preview,
            hold_shape=self.held_piece.shape(0) if self.held_piece is not None else None,
        )

    def reset(self) -> None:
        """Start a fresh game. Does not spawn; call `spawn_piece` afterwards."""
        self.grid.reset()
        self.score.reset()
        self.held_piece = None
        self.hold_used = False
        self.rotator = RotationTracker()
        self.current_shape = None
        self.next_preview = None
