from __future__ import annotations

import pytest

from logos.metrics import StepRecord, summarize


def test_summary_counts_and_rates() -> None:
    records = [
        StepRecord(0, 0, 1, 0.0, 0, skipped=False),
        StepRecord(1, 1, 1, 0.5, 50, skipped=False),
        StepRecord(2, 2, 1, 1.0, 100, skipped=False),
        StepRecord(3, 3, 1, 0.0, 0, skipped=True),
    ]
    summary = summarize(records, elapsed_sec=2.0)
    assert summary.steps == 4
    assert summary.active_steps == 3
    assert summary.skipped_steps == 1
    assert summary.total_chars == 150
    assert summary.max_chars_per_step == 100
    assert summary.mean_chars_per_step == pytest.approx(37.5)
    assert summary.achieved_rate == pytest.approx(75.0)
    assert 50.0 <= summary.p95_chars_per_step <= 100.0


def test_empty_summary() -> None:
    summary = summarize([], elapsed_sec=0.0)
    assert summary.steps == 0
    assert summary.total_chars == 0
    assert summary.achieved_rate == 0.0
