from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Board, EventSource, EventType, GameConfig, GameController, MoveEvent, TetrominoType
from falling_blocks.game.generator import RandomPieceSupplier
from falling_blocks.game.matrix import overlay


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    HOLD = 5
    NONE = 6


_ACTION_EVENTS = {
    Action.LEFT: EventType.LEFT,
    Action.RIGHT: EventType.RIGHT,
    Action.ROTATE: EventType.ROTATE,
    Action.SOFT_DROP: EventType.DOWN,
    Action.HARD_DROP: EventType.HARD_DROP,
    Action.HOLD: EventType.HOLD,
}


class FallingBlocksEnv(gym.Env):
    """Gymnasium front-end over `GameController`.

    Every action is a player (USER) event. Gravity is simulated as a timer
    (THREAD) down event every `gravity_every` steps, so soft drops earn the
    player bonus while gravity does not.

    Observation is the visible part of the grid with the active piece
    overlaid as negative colour ids. Reward is the score delta.
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        gravity_every: int = 1,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        if gravity_every < 0:
            raise ValueError("gravity_every must be >= 0 (0 disables gravity)")
        self.config = config or GameConfig()
        self.gravity_every = int(gravity_every)
        self.max_episode_steps = int(max_episode_steps)
        self.controller = GameController(Board(self.config))
        self._steps = 0

        visible = self.config.height - self.config.hidden_rows
        self.observation_space = spaces.Box(
            low=-len(TetrominoType), high=len(TetrominoType), shape=(visible, self.config.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

    @property
    def board(self) -> Board:
        return self.controller.board

    def _get_obs(self) -> np.ndarray:
        hidden = self.config.hidden_rows
        state = self.board.grid.visible_state(hidden)
        if not self.controller.game_over:
            x, y = self.board.position
            # Cells still inside the hidden rows fall off the top and are skipped.
            state = overlay(state, -self.board.current_shape, x, y - hidden)
        return state.astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.controller.score,
            "lines_cleared_total": self.controller.lines_cleared_total,
            "pieces_locked": self.controller.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.board.supplier = RandomPieceSupplier(seed)
        self.controller.new_game()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        act = Action(int(action))
        before = self.controller.score

        event_type = _ACTION_EVENTS.get(act)
        if event_type is not None:
            self.controller.handle(MoveEvent(event_type, EventSource.USER))

        self._steps += 1
        if self.gravity_every and self._steps % self.gravity_every == 0 and not self.controller.game_over:
            self.controller.on_down_event(MoveEvent(EventType.DOWN, EventSource.THREAD))

        reward = float(self.controller.score - before)
        terminated = bool(self.controller.game_over)
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()
