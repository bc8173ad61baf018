from __future__ import annotations

from random import Random

from logos.config import RunConfig, ShaperMode
from logos.errors import ConfigError
from logos.shapers.base import RateShaper
from logos.shapers.logistic import LogisticShaper
from logos.shapers.ramp import RampShaper


def shaper_for(config: RunConfig, rng: Random) -> RateShaper:
    mode = config.resolved_mode()
    if mode is ShaperMode.LOGISTIC:
        peak_step = rng.randrange(config.total_steps)
        return LogisticShaper(mu=peak_step, scale=config.scale)
    if mode is ShaperMode.RAMP:
        return RampShaper(peak_step=config.ramp_steps)
    msg = f"Unsupported shaper mode: {mode}"
    raise ConfigError(msg)
