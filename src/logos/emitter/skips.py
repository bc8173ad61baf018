from __future__ import annotations

import math
from random import Random


def sample_skips(rng: Random, expected_skips: int, skip_probability: float) -> int:
    """Number of trailing steps of the next slice that emit nothing.

    With probability ``skip_probability`` the count is a Poisson draw with mean
    ``expected_skips`` (Knuth's multiplicative method); otherwise it is 0. The
    draw is not clamped to the slice length.
    """
    if expected_skips <= 0 or rng.random() >= skip_probability:
        return 0

    limit = math.exp(-expected_skips)
    k = 0
    p = 1.0
    while True:
        p *= rng.random()
        if p <= limit:
            return k
        k += 1
