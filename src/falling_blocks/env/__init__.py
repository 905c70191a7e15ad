"""Gymnasium environments for Falling Blocks."""

from __future__ import annotations

from gymnasium.envs.registration import register

from .falling_blocks_env import Action, FallingBlocksEnv

# Default 10-wide, 25-tall board (2 hidden spawn rows)
register(
    id="FallingBlocks-10x25-v0",
    entry_point="falling_blocks.env.falling_blocks_env:FallingBlocksEnv",
)

__all__ = ["Action", "FallingBlocksEnv"]
