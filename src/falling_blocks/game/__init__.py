"""Game module for Falling Blocks.

Exports the core engine and supporting classes:
- TetrominoType / Piece: shape catalog with fixed rotation states
- RandomPieceSupplier: random piece sequence with one-piece lookahead
- RotationTracker: test-and-commit rotation state of the active piece
- GameGrid: settled blocks, collision and line clearing
- ScoringRules / Score: scoring constants and the running score
- Board: the engine state machine (spawn, move, rotate, hold, ghost)
- ViewSnapshot: immutable per-frame state for renderers
- GameController: event-driven driver with the settle sequence
"""

from .pieces import Piece, TetrominoType, rotation_states
from .generator import PieceSupplier, RandomPieceSupplier, ScriptedPieceSupplier
from .rotation import RotationPreview, RotationTracker
from .grid import GameGrid, LineClearResult
from .rules import Score, ScoringRules
from .view import ViewSnapshot
from .core import Board, GameConfig
from .controller import DownData, EventSource, EventType, GameController, MoveEvent

__all__ = [
    "Piece",
    "TetrominoType",
    "rotation_states",
    "PieceSupplier",
    "RandomPieceSupplier",
    "ScriptedPieceSupplier",
    "RotationPreview",
    "RotationTracker",
    "GameGrid",
    "LineClearResult",
    "Score",
    "ScoringRules",
    "ViewSnapshot",
    "Board",
    "GameConfig",
    "DownData",
    "EventSource",
    "EventType",
    "GameController",
    "MoveEvent",
]
