from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
from typing import Any, Mapping

from logos.errors import ConfigError

# Tolerance for float step arithmetic, e.g. 0.3 / 0.1 == 2.9999999999999996.
STEP_EPSILON = 1e-9


class ShaperMode(str, Enum):
    LOGISTIC = "logistic"
    RAMP = "ramp"


def _whole_steps(span_sec: float, step_sec: float) -> int:
    return int(math.floor(span_sec / step_sec + STEP_EPSILON))


@dataclass(frozen=True, slots=True)
class RunConfig:
    peak_rate: int
    mode: ShaperMode = ShaperMode.LOGISTIC
    step_sec: float = 0.25
    duration_sec: float = 60.0
    slice_len: int = 16
    skips: int = 2
    skip_probability: float = 0.0
    scale: float = 25.0
    ramp_duration_sec: float = 10.0
    block_size: int = 4096
    pool_size: int = 32
    seed: int | None = None

    @property
    def chars_per_step(self) -> float:
        return self.peak_rate * self.step_sec

    @property
    def total_steps(self) -> int:
        return max(1, _whole_steps(self.duration_sec, self.step_sec))

    @property
    def ramp_steps(self) -> int:
        return _whole_steps(self.ramp_duration_sec, self.step_sec)

    def resolved_mode(self) -> ShaperMode:
        try:
            return ShaperMode(self.mode)
        except ValueError as exc:
            msg = "invalid mode: must be one of 'logistic' or 'ramp'"
            raise ConfigError(msg) from exc

    def validate(self) -> None:
        mode = self.resolved_mode()
        if self.peak_rate <= 0:
            msg = "invalid rate: must be greater than zero"
            raise ConfigError(msg)
        if self.duration_sec <= 0:
            msg = "invalid duration: must be greater than zero"
            raise ConfigError(msg)
        if self.step_sec <= 0:
            msg = "invalid step size: must be greater than zero"
            raise ConfigError(msg)
        if self.step_sec > self.duration_sec:
            msg = "invalid step size: must be less than duration"
            raise ConfigError(msg)
        if self.slice_len <= 0:
            msg = "invalid slice length: must be greater than zero"
            raise ConfigError(msg)
        if self.skips < 0:
            msg = "invalid skips: must not be negative"
            raise ConfigError(msg)
        if self.skips > self.slice_len:
            msg = "invalid skips: must be less than slice length"
            raise ConfigError(msg)
        if not 0.0 <= self.skip_probability <= 1.0:
            msg = "invalid skip probability: must be in [0.0, 1.0]"
            raise ConfigError(msg)
        if self.block_size <= 0:
            msg = "invalid block size: must be greater than zero"
            raise ConfigError(msg)
        if self.pool_size <= 0:
            msg = "invalid pool size: must be greater than zero"
            raise ConfigError(msg)
        if self.ramp_duration_sec < 0:
            msg = "invalid ramp duration: must not be negative"
            raise ConfigError(msg)
        if mode is ShaperMode.LOGISTIC and self.scale <= 0:
            msg = "invalid scale: must be greater than zero"
            raise ConfigError(msg)

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "peak_rate": self.peak_rate,
            "mode": self.resolved_mode().value,
            "step_sec": self.step_sec,
            "duration_sec": self.duration_sec,
            "total_steps": self.total_steps,
            "slice_len": self.slice_len,
            "skips": self.skips,
            "skip_probability": self.skip_probability,
            "scale": self.scale,
            "ramp_duration_sec": self.ramp_duration_sec,
            "block_size": self.block_size,
            "pool_size": self.pool_size,
            "seed": self.seed,
        }
