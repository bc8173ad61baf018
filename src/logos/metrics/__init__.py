from __future__ import annotations

from logos.metrics.aggregator import summarize
from logos.metrics.models import EmissionSummary, StepRecord

__all__ = ["EmissionSummary", "StepRecord", "summarize"]
