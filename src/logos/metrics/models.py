from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StepRecord:
    step: int
    slice_idx: int
    skips: int
    fraction: float
    chars: int
    skipped: bool


@dataclass(frozen=True, slots=True)
class EmissionSummary:
    steps: int
    active_steps: int
    skipped_steps: int
    total_chars: int
    mean_chars_per_step: float
    p95_chars_per_step: float
    max_chars_per_step: int
    achieved_rate: float
