from __future__ import annotations

import errno
import logging

import pytest

from logos import cli
from logos.cli import build_parser, config_from_args, main
from logos.config import ShaperMode
from logos.emitter import ALPHABET
from logos.errors import ConfigError, SinkWriteError


def test_parser_defaults() -> None:
    config = config_from_args(build_parser().parse_args([]))
    assert config.peak_rate == 128
    assert config.mode is ShaperMode.LOGISTIC
    assert config.step_sec == 0.25
    assert config.duration_sec == 60.0
    assert config.slice_len == 16
    assert config.skips == 2
    assert config.skip_probability == 0.0
    assert config.block_size == 4096
    assert config.scale == 25.0
    assert config.ramp_duration_sec == 10.0
    assert config.seed is None


def test_flags_are_parsed() -> None:
    args = build_parser().parse_args(
        [
            "--rate",
            "10k",
            "--mode",
            "ramp",
            "--duration",
            "1m30s",
            "--step-size",
            "100ms",
            "--ramp-duration",
            "5s",
            "--skip-probability",
            "0.5",
            "--seed",
            "4",
        ]
    )
    config = config_from_args(args)
    assert config.peak_rate == 10_000
    assert config.mode is ShaperMode.RAMP
    assert config.duration_sec == 90.0
    assert config.step_sec == pytest.approx(0.1)
    assert config.ramp_steps == 50
    assert config.seed == 4


def test_invalid_flags_raise_config_error() -> None:
    args = build_parser().parse_args(["--skips", "20", "--slice-length", "4"])
    with pytest.raises(ConfigError, match="invalid skips"):
        config_from_args(args)


@pytest.mark.parametrize(
    "argv",
    [
        ["--rate", ""],
        ["--rate", "fast"],
        ["--step-size", "2m", "--duration", "1m"],
        ["--skip-probability", "2"],
        ["--duration", "soon"],
    ],
)
def test_config_errors_exit_nonzero(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv) == 1
    assert capsys.readouterr().out == ""


def test_dry_run_prints_plan(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["--dry-run", "--mode", "ramp", "--rate", "100", "--step-size", "1s", "--duration", "5s", "--ramp-duration", "5s"]
    assert main(argv) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["0\t0", "1\t20", "2\t40", "3\t60", "4\t80"]


def test_short_run_writes_text(capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    argv = [
        "--mode",
        "ramp",
        "--rate",
        "10k",
        "--duration",
        "50ms",
        "--step-size",
        "10ms",
        "--ramp-duration",
        "0s",
        "--block-size",
        "64",
        "--seed",
        "1",
    ]
    assert main(argv) == 0
    out = capsysbinary.readouterr().out
    assert len(out) > 0
    assert len(out) % 100 == 0
    assert set(out) <= set(ALPHABET) | {ord("\n")}


def _raising(exc: BaseException):
    def run_emission(*args, **kwargs):
        raise exc

    return run_emission


def _broken_pipe() -> SinkWriteError:
    err = SinkWriteError("write to output failed")
    err.__cause__ = BrokenPipeError(errno.EPIPE, "Broken pipe")
    return err


def test_broken_pipe_exits_quietly(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    silenced: list[bool] = []
    monkeypatch.setattr(cli, "run_emission", _raising(_broken_pipe()))
    monkeypatch.setattr(cli, "_silence_stdout", lambda: silenced.append(True))
    assert main(["--duration", "1s"]) == 1
    assert silenced == [True]
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_other_write_errors_are_logged(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    err = SinkWriteError("flushing output failed")
    err.__cause__ = OSError(errno.EIO, "Input/output error")
    monkeypatch.setattr(cli, "run_emission", _raising(err))
    monkeypatch.setattr(cli, "_silence_stdout", lambda: pytest.fail("stdout silenced"))
    assert main(["--duration", "1s"]) == 1
    assert "flushing output failed" in caplog.text


def test_interrupt_exits_130(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "run_emission", _raising(KeyboardInterrupt()))
    assert main(["--duration", "1s"]) == 130
