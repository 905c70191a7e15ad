"""Falling-block puzzle engine.

The engine lives in `falling_blocks.game`; `falling_blocks.env` wraps it as a
Gymnasium environment.
"""
