from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class RateShaper(Protocol):
    """Returns the multiple of the peak rate, between 0.0 and 1.0, for a step."""

    def fraction(self, step: int) -> float:
        ...


@dataclass(frozen=True, slots=True)
class ShapeSchedule:
    chars_per_step: list[int]

    @classmethod
    def preview(cls, shaper: RateShaper, chars_per_step: float, steps: int) -> ShapeSchedule:
        return cls([int(chars_per_step * shaper.fraction(step)) for step in range(steps)])

    def steps(self) -> int:
        return len(self.chars_per_step)

    def total_chars(self) -> int:
        return sum(self.chars_per_step)
