from __future__ import annotations

from typing import Sequence

import numpy as np

from logos.metrics.models import EmissionSummary, StepRecord


def summarize(records: Sequence[StepRecord], elapsed_sec: float) -> EmissionSummary:
    chars = np.fromiter((r.chars for r in records), dtype=np.int64, count=len(records))
    skipped = sum(1 for r in records if r.skipped)
    if chars.size:
        total = int(chars.sum())
        mean = float(chars.mean())
        p95 = float(np.percentile(chars, 95))
        peak = int(chars.max())
    else:
        total = peak = 0
        mean = p95 = 0.0
    rate = total / elapsed_sec if elapsed_sec > 0 else 0.0
    return EmissionSummary(
        steps=len(records),
        active_steps=len(records) - skipped,
        skipped_steps=skipped,
        total_chars=total,
        mean_chars_per_step=mean,
        p95_chars_per_step=p95,
        max_chars_per_step=peak,
        achieved_rate=rate,
    )
