from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RampShaper:
    """Climbs linearly to the peak rate over ``peak_step`` steps, then holds."""

    peak_step: int

    def fraction(self, step: int) -> float:
        if step < self.peak_step:
            return step / self.peak_step
        return 1.0
