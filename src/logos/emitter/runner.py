from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable

from logos.config import RunConfig
from logos.config.models import STEP_EPSILON
from logos.emitter.clock import Clock, MonotonicClock
from logos.emitter.output import RandomAlphabetPool, Sink
from logos.emitter.skips import sample_skips
from logos.errors import SinkWriteError
from logos.metrics import EmissionSummary, StepRecord, summarize
from logos.shapers import RateShaper, shaper_for

LOG = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class RunResult:
    seed: int | None
    records: list[StepRecord]
    started: float
    finished: float

    @property
    def elapsed_sec(self) -> float:
        return self.finished - self.started

    @property
    def total_chars(self) -> int:
        return sum(r.chars for r in self.records)

    def summary(self) -> EmissionSummary:
        return summarize(self.records, self.elapsed_sec)


def _new_seed() -> int:
    return random.randint(0, 2**31)


async def run_emission(
    config: RunConfig,
    sink: Sink,
    rng: random.Random | None = None,
    clock: Clock | None = None,
    progress: ProgressCallback | None = None,
) -> RunResult:
    """Write shaped random text to ``sink`` until ``config.duration_sec`` elapses.

    All randomness (pool contents, logistic peak, skip draws) comes from one
    generator: ``rng`` when given, else one seeded from ``config.seed`` or a
    freshly drawn seed that is reported in the result.
    """
    config.validate()
    seed = config.seed
    if rng is None:
        if seed is None:
            seed = _new_seed()
        rng = random.Random(seed)
    clock = clock or MonotonicClock()

    pool = RandomAlphabetPool(rng, config.pool_size, config.block_size)
    shaper = shaper_for(config, rng)
    LOG.info(
        "starting %s run: seed=%s shaper=%r steps=%d peak_rate=%d",
        config.resolved_mode().value,
        seed,
        shaper,
        config.total_steps,
        config.peak_rate,
    )

    started = clock.now()
    records = await _emission_loop(config, sink, rng, clock, pool, shaper, started, progress)
    result = RunResult(seed=seed, records=records, started=started, finished=clock.now())
    LOG.info("run finished: %d steps, %d chars", len(records), result.total_chars)
    return result


def emit(
    config: RunConfig,
    sink: Sink,
    rng: random.Random | None = None,
    clock: Clock | None = None,
) -> RunResult:
    return asyncio.run(run_emission(config, sink, rng=rng, clock=clock))


async def _emission_loop(
    config: RunConfig,
    sink: Sink,
    rng: random.Random,
    clock: Clock,
    pool: RandomAlphabetPool,
    shaper: RateShaper,
    started: float,
    progress: ProgressCallback | None,
) -> list[StepRecord]:
    records: list[StepRecord] = []
    deadline = started + config.duration_sec
    # Ticks within this tolerance of the deadline count as due with it.
    tolerance = STEP_EPSILON * config.step_sec
    tick_index = 0
    skips = 0
    step = 0
    while True:
        slice_idx = step % config.slice_len
        if slice_idx == 0:
            skips = sample_skips(rng, config.skips, config.skip_probability)
            if skips:
                LOG.debug("slice at step %d: skipping %d trailing steps", step, skips)

        next_tick = started + tick_index * config.step_sec
        # The deadline wins whenever it is due no later than the tick.
        if deadline <= max(next_tick, clock.now()) + tolerance:
            await clock.sleep_until(deadline)
            break
        await clock.sleep_until(next_tick)

        if slice_idx < config.slice_len - skips:
            fraction = shaper.fraction(step)
            n = int(config.chars_per_step * fraction)
            if n > 0:
                pool.write_n(sink, n)
                _flush(sink)
            records.append(StepRecord(step, slice_idx, skips, fraction, n, skipped=False))
        else:
            records.append(StepRecord(step, slice_idx, skips, 0.0, 0, skipped=True))

        tick_index = _next_tick_index(tick_index, started, config.step_sec, clock.now())
        if progress:
            await progress(step + 1, config.total_steps)
        step += 1
    return records


def _next_tick_index(index: int, started: float, step_sec: float, now: float) -> int:
    following = index + 1
    latest_due = int((now - started) / step_sec + STEP_EPSILON)
    if latest_due > following:
        # Ticks missed while writing are dropped; the newest one fires at once.
        LOG.debug("output fell behind; dropped %d ticks", latest_due - following)
        return latest_due
    return following


def _flush(sink: Sink) -> None:
    flush = getattr(sink, "flush", None)
    if flush is None:
        return
    try:
        flush()
    except OSError as exc:
        msg = "flushing output failed"
        raise SinkWriteError(msg) from exc
