# tests/test_controller.py
from __future__ import annotations

import pytest

from falling_blocks.game import (
    EventSource,
    EventType,
    GameController,
    MoveEvent,
    Piece,
    Score,
    ScoringRules,
    TetrominoType,
    ViewSnapshot,
)
from falling_blocks.errors import ConfigError

O, I = TetrominoType.O, TetrominoType.I


@pytest.fixture
def controller(make_board) -> GameController:
    return GameController(make_board([O]))


def test_player_soft_drop_scores_but_gravity_does_not(controller: GameController) -> None:
    controller.on_down_event(MoveEvent(EventType.DOWN, EventSource.THREAD))
    assert controller.score == 0

    data = controller.on_down_event(MoveEvent(EventType.DOWN, EventSource.USER))
    assert controller.score == 1
    assert data.clear_result is None
    assert data.view.y == 2


def test_blocked_down_settles_and_respawns(controller: GameController) -> None:
    controller.board.hard_drop()

    data = controller.on_down_event(MoveEvent(EventType.DOWN, EventSource.USER))

    assert data.clear_result is not None
    assert data.clear_result.lines_removed == 0
    assert controller.score == 0
    assert controller.pieces_locked == 1
    assert data.view.position == (3, 0)
    assert controller.board.background()[23:, 4:6].tolist() == [[4, 4], [4, 4]]


def test_hard_drop_clears_lines_and_applies_bonus(controller: GameController) -> None:
    cells = controller.board.grid.cells
    cells[23:, :] = 1
    cells[23:, 4:6] = 0

    data = controller.on_hard_drop_event()

    assert data.clear_result.lines_removed == 2
    assert data.clear_result.score_bonus == 200
    assert controller.score == 200
    assert controller.lines_cleared_total == 2
    assert not controller.board.background().any()
    assert data.view.ghost_position == (3, 22)


def test_game_over_is_latched_and_ignores_input(controller: GameController) -> None:
    cells = controller.board.grid.cells
    cells[0:3, 1:] = 1

    controller.on_hard_drop_event()
    assert controller.game_over is True

    before = controller.board.position
    controller.on_left_event(MoveEvent(EventType.LEFT))
    controller.on_down_event(MoveEvent(EventType.DOWN))
    data = controller.on_hard_drop_event()
    assert controller.board.position == before
    assert data.clear_result is None
    assert controller.pieces_locked == 1


def test_new_game_restarts(controller: GameController) -> None:
    controller.board.grid.cells[0:3, 1:] = 1
    controller.on_hard_drop_event()
    assert controller.game_over

    view = controller.new_game()

    assert controller.game_over is False
    assert controller.score == 0
    assert controller.pieces_locked == 0
    assert view.position == (3, 0)
    assert not controller.board.background().any()


def test_handle_dispatches_by_event_type(make_board) -> None:
    controller = GameController(make_board([I, O]))

    assert isinstance(controller.handle(MoveEvent(EventType.LEFT)), ViewSnapshot)
    assert controller.board.position == (2, 0)
    controller.handle(MoveEvent(EventType.RIGHT))
    controller.handle(MoveEvent(EventType.RIGHT))
    assert controller.board.position == (4, 0)
    controller.handle(MoveEvent(EventType.ROTATE))
    assert controller.board.rotation_index == 1

    view = controller.handle(MoveEvent(EventType.HOLD))
    assert controller.board.held_piece == Piece(I)
    assert view.hold_shape is not None

    data = controller.handle(MoveEvent(EventType.HARD_DROP))
    assert data.clear_result is not None
    assert controller.pieces_locked == 1


def test_hold_blocked_spawn_ends_game(make_board) -> None:
    controller = GameController(make_board([I, O]))
    controller.board.move_down()
    controller.board.move_down()
    cells = controller.board.grid.cells
    cells[0:2, 1:] = 1
    cells[2, 3:7] = 1

    controller.on_hold_event()
    assert controller.game_over is True


def test_score_rejects_negative_amounts() -> None:
    score = Score()
    score.add(5)
    with pytest.raises(ValueError, match="non-negative"):
        score.add(-1)
    assert score.current == 5
    score.reset()
    assert score.current == 0


def test_scoring_rules_validation() -> None:
    assert ScoringRules(line_clear_base=100).bonus_for_lines(3) == 900
    with pytest.raises(ConfigError):
        ScoringRules(soft_drop_points=-1)
