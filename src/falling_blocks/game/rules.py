from __future__ import annotations

from dataclasses import dataclass

from ..errors import ConfigError


@dataclass
class ScoringRules:
    line_clear_base: int = 50
    soft_drop_points: int = 1

    def __post_init__(self) -> None:
        if self.line_clear_base < 0 or self.soft_drop_points < 0:
            raise ConfigError("scoring constants must be non-negative")

    def bonus_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        # Quadratic so multi-line clears pay more than the same lines one by one
        return self.line_clear_base * lines * lines


class Score:
    def __init__(self) -> None:
        self._value = 0

    @property
    def current(self) -> int:
        return self._value

    def add(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"score increments must be non-negative, got {amount}")
        self._value += int(amount)

    def reset(self) -> None:
        self._value = 0
