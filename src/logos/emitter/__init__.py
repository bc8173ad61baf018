from __future__ import annotations

from logos.emitter.clock import Clock, ManualClock, MonotonicClock
from logos.emitter.output import ALPHABET, RandomAlphabetPool
from logos.emitter.runner import RunResult, emit, run_emission
from logos.emitter.skips import sample_skips

__all__ = [
    "ALPHABET",
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "RandomAlphabetPool",
    "RunResult",
    "emit",
    "run_emission",
    "sample_skips",
]
