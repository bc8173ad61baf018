from __future__ import annotations

import argparse
import asyncio
import errno
import logging
import os
import random
import sys

from logos.config import RunConfig, ShaperMode, parse_duration, parse_rate
from logos.emitter.runner import run_emission
from logos.errors import ConfigError, SinkWriteError
from logos.shapers import ShapeSchedule, shaper_for

LOG = logging.getLogger("logos")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logos",
        description="Write random text to stdout at a shaped, bursty rate.",
    )
    parser.add_argument("--rate", default="128", help="peak character rate in chars/s (k/M/G suffixes allowed)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ShaperMode],
        default=ShaperMode.LOGISTIC.value,
        help="the operation mode",
    )
    parser.add_argument("--skips", type=int, default=2, help="expected number of time steps with no output per slice")
    parser.add_argument(
        "--skip-probability",
        type=float,
        default=0.0,
        help="probability that a given slice will contain skips",
    )
    parser.add_argument("--duration", default="60s", help="run duration, e.g. 60s or 1m30s")
    parser.add_argument("--step-size", default="250ms", help="length of each time step")
    parser.add_argument("--slice-length", type=int, default=16, help="number of time steps per slice")
    parser.add_argument(
        "--block-size",
        type=int,
        default=4096,
        help="maximum number of characters printed in one line/operation",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=25.0,
        help="scale factor for the output distribution; only used with --mode=logistic",
    )
    parser.add_argument(
        "--ramp-duration",
        default="10s",
        help="time taken to reach the peak rate; only used with --mode=ramp",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the planned characters per step instead of emitting text",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    config = RunConfig(
        peak_rate=parse_rate(args.rate),
        mode=ShaperMode(args.mode),
        step_sec=parse_duration(args.step_size),
        duration_sec=parse_duration(args.duration),
        slice_len=args.slice_length,
        skips=args.skips,
        skip_probability=args.skip_probability,
        scale=args.scale,
        ramp_duration_sec=parse_duration(args.ramp_duration),
        block_size=args.block_size,
        seed=args.seed,
    )
    config.validate()
    return config


def _print_plan(config: RunConfig) -> None:
    rng = random.Random(config.seed)
    shaper = shaper_for(config, rng)
    schedule = ShapeSchedule.preview(shaper, config.chars_per_step, config.total_steps)
    for step, chars in enumerate(schedule.chars_per_step):
        print(f"{step}\t{chars}")
    LOG.info("planned %d chars over %d steps (before skips)", schedule.total_chars(), schedule.steps())


def _silence_stdout() -> None:
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = config_from_args(args)
    except ConfigError as exc:
        LOG.error("%s", exc)
        return 1
    LOG.debug("config: %s", config.to_metadata())

    if args.dry_run:
        _print_plan(config)
        return 0

    try:
        result = asyncio.run(run_emission(config, sys.stdout.buffer))
    except SinkWriteError as exc:
        if isinstance(exc.__cause__, OSError) and exc.__cause__.errno == errno.EPIPE:
            _silence_stdout()
            return 1
        LOG.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 130

    summary = result.summary()
    LOG.info(
        "emitted %d chars in %.1fs (%.0f chars/s); %d of %d steps skipped, p95 %.0f chars/step",
        summary.total_chars,
        result.elapsed_sec,
        summary.achieved_rate,
        summary.skipped_steps,
        summary.steps,
        summary.p95_chars_per_step,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
