from __future__ import annotations


class FallingBlocksError(Exception):
    """Base class for errors raised by the engine."""


class ConfigError(FallingBlocksError, ValueError):
    """Invalid board or scoring configuration."""


class NoActivePieceError(FallingBlocksError, RuntimeError):
    """An active-piece operation was called before any piece was spawned."""


__all__ = ["FallingBlocksError", "ConfigError", "NoActivePieceError"]
