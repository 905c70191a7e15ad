# tests/test_rotation.py
from __future__ import annotations

import numpy as np
import pytest

from falling_blocks.errors import NoActivePieceError
from falling_blocks.game import Piece, RotationTracker, TetrominoType


def test_preview_does_not_mutate_committed_index() -> None:
    tracker = RotationTracker()
    tracker.assign(Piece(TetrominoType.T))

    preview = tracker.preview_next_rotation()
    assert preview.index == 1
    assert np.array_equal(preview.shape, Piece(TetrominoType.T).shape(1))
    assert tracker.rotation_index == 0

    tracker.commit_rotation(preview.index)
    assert tracker.rotation_index == 1
    assert np.array_equal(tracker.current_shape(), preview.shape)


def test_preview_wraps_to_first_state() -> None:
    tracker = RotationTracker()
    tracker.assign(Piece(TetrominoType.T))
    tracker.commit_rotation(3)
    assert tracker.preview_next_rotation().index == 0


def test_single_state_piece_previews_itself() -> None:
    tracker = RotationTracker()
    tracker.assign(Piece(TetrominoType.O))
    assert tracker.preview_next_rotation().index == 0


def test_assign_resets_rotation() -> None:
    tracker = RotationTracker()
    tracker.assign(Piece(TetrominoType.J))
    tracker.commit_rotation(2)
    tracker.assign(Piece(TetrominoType.L))
    assert tracker.rotation_index == 0


def test_commit_rejects_out_of_range_index() -> None:
    tracker = RotationTracker()
    tracker.assign(Piece(TetrominoType.I))
    with pytest.raises(ValueError, match="out of range"):
        tracker.commit_rotation(2)


def test_tracker_without_piece_raises() -> None:
    with pytest.raises(NoActivePieceError):
        RotationTracker().current_shape()
