from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .core import Board
from .grid import LineClearResult
from .view import ViewSnapshot

logger = logging.getLogger(__name__)


class EventType(Enum):
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    HOLD = "hold"


class EventSource(Enum):
    USER = "user"
    THREAD = "thread"  # gravity timer


@dataclass(frozen=True)
class MoveEvent:
    event_type: EventType
    event_source: EventSource = EventSource.USER


@dataclass(frozen=True)
class DownData:
    clear_result: Optional[LineClearResult]
    view: ViewSnapshot


class GameController:
    """Drives a `Board` from discrete input and timer events.

    Owns the policies that sit on top of the engine: points for player soft
    drops, applying line-clear bonuses, and the settle/respawn sequence.
    Once game over is latched, events are ignored until `new_game()`.
    """

    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = board or Board()
        self.game_over = False
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.new_game()

    @property
    def score(self) -> int:
        return self.board.score.current

    def new_game(self) -> ViewSnapshot:
        self.board.reset()
        self.game_over = False
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        if self.board.spawn_piece():
            self._end_game()
        return self.board.snapshot()

    def _end_game(self) -> None:
        self.game_over = True
        logger.info(
            "game over: score=%d lines=%d pieces=%d",
            self.score, self.lines_cleared_total, self.pieces_locked,
        )

    def _settle(self) -> LineClearResult:
        self.board.merge_active_into_grid()
        self.pieces_locked += 1
        result = self.board.clear_full_rows()
        if result.lines_removed > 0:
            self.board.score.add(result.score_bonus)
            self.lines_cleared_total += result.lines_removed
        if self.board.spawn_piece():
            self._end_game()
        return result

    def on_down_event(self, event: MoveEvent) -> DownData:
        if self.game_over:
            return DownData(None, self.board.snapshot())
        if self.board.move_down():
            if event.event_source is EventSource.USER:
                self.board.score.add(self.board.rules.soft_drop_points)
            return DownData(None, self.board.snapshot())
        return DownData(self._settle(), self.board.snapshot())

    def on_left_event(self, event: MoveEvent) -> ViewSnapshot:
        if not self.game_over:
            self.board.move_left()
        return self.board.snapshot()

    def on_right_event(self, event: MoveEvent) -> ViewSnapshot:
        if not self.game_over:
            self.board.move_right()
        return self.board.snapshot()

    def on_rotate_event(self, event: MoveEvent) -> ViewSnapshot:
        if not self.game_over:
            self.board.rotate()
        return self.board.snapshot()

    def on_hard_drop_event(self) -> DownData:
        if self.game_over:
            return DownData(None, self.board.snapshot())
        self.board.hard_drop()
        return DownData(self._settle(), self.board.snapshot())

    def on_hold_event(self) -> ViewSnapshot:
        if not self.game_over and self.board.hold_swap():
            self._end_game()
        return self.board.snapshot()

    def handle(self, event: MoveEvent) -> Union[DownData, ViewSnapshot]:
        if event.event_type is EventType.DOWN:
            return self.on_down_event(event)
        if event.event_type is EventType.LEFT:
            return self.on_left_event(event)
        if event.event_type is EventType.RIGHT:
            return self.on_right_event(event)
        if event.event_type is EventType.ROTATE:
            return self.on_rotate_event(event)
        if event.event_type is EventType.HARD_DROP:
            return self.on_hard_drop_event()
        if event.event_type is EventType.HOLD:
            return self.on_hold_event()
        raise ValueError(f"unsupported event type: {event.event_type!r}")
