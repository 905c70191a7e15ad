from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import NoActivePieceError
from .pieces import Piece, Shape


@dataclass(frozen=True)
class RotationPreview:
    shape: Shape
    index: int


class RotationTracker:
    """Active piece plus the index of its committed rotation state.

    Rotation is test-and-commit: `preview_next_rotation` never changes the
    committed index, only `commit_rotation` does.
    """

    def __init__(self) -> None:
        self.piece: Optional[Piece] = None
        self.rotation_index = 0

    def assign(self, piece: Piece) -> None:
        self.piece = piece
        self.rotation_index = 0

    def _require_piece(self) -> Piece:
        if self.piece is None:
            raise NoActivePieceError("no piece assigned to the rotation tracker")
        return self.piece

    def current_shape(self) -> Shape:
        return self._require_piece().shape(self.rotation_index)

    def preview_next_rotation(self) -> RotationPreview:
        piece = self._require_piece()
        nxt = (self.rotation_index + 1) % piece.state_count
        return RotationPreview(shape=piece.shape(nxt), index=nxt)

    def commit_rotation(self, index: int) -> None:
        piece = self._require_piece()
        if not 0 <= index < piece.state_count:
            raise ValueError(
                f"rotation index {index} out of range for {piece.kind.name} ({piece.state_count} states)"
            )
        self.rotation_index = index
