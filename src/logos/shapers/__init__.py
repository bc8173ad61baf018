from __future__ import annotations

from logos.shapers.base import RateShaper, ShapeSchedule
from logos.shapers.factory import shaper_for
from logos.shapers.logistic import LogisticShaper
from logos.shapers.ramp import RampShaper

__all__ = ["LogisticShaper", "RampShaper", "RateShaper", "ShapeSchedule", "shaper_for"]
