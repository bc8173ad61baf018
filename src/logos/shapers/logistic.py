from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True, slots=True)
class LogisticShaper:
    """Logistic density centred on ``mu``, rescaled so the peak is exactly 1.0.

    https://en.wikipedia.org/wiki/Logistic_distribution
    """

    mu: int
    scale: float

    def fraction(self, step: int) -> float:
        # The density is symmetric about mu; using the distance keeps exp() <= 1.
        a = math.exp(-abs(step - self.mu) / self.scale)
        b = self.scale * (1.0 + a) ** 2
        return min(1.0, 4.0 * self.scale * a / b)
