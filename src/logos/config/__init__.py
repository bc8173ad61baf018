from __future__ import annotations

from logos.config.models import RunConfig, ShaperMode
from logos.config.parsing import parse_duration, parse_rate

__all__ = [
    "RunConfig",
    "ShaperMode",
    "parse_duration",
    "parse_rate",
]
