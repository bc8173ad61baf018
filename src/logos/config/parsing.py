"""Parsing of the human-friendly rate and duration strings the CLI accepts."""

from __future__ import annotations

import re

from logos.errors import ConfigError

_RATE_SUFFIXES = {
    "k": 1_000,
    "m": 1_000_000,
    "g": 1_000_000_000,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_DURATION_PART = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")
_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def parse_rate(rate: str) -> int:
    """Parse a character rate such as ``"128"``, ``"10k"`` or ``"2M"``.

    The optional suffix (case-insensitive) multiplies by 10^3, 10^6 or 10^9.
    """
    if not rate:
        msg = "invalid rate: rate must be non-empty"
        raise ConfigError(msg)
    multiplier = _RATE_SUFFIXES.get(rate[-1].lower(), 1)
    base = rate[:-1] if multiplier != 1 else rate
    if not _INTEGER.fullmatch(base):
        msg = f"invalid rate: {rate!r} is not an integer"
        raise ConfigError(msg)
    return int(base) * multiplier


def parse_duration(value: str) -> float:
    """Parse ``"250ms"``, ``"1m30s"``, ``"1.5h"`` or a bare number of seconds."""
    text = value.strip()
    if not text:
        msg = "invalid duration: duration must be non-empty"
        raise ConfigError(msg)
    sign = 1.0
    if text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]
    if _NUMBER.fullmatch(text):
        return sign * float(text)
    total = 0.0
    pos = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()
    if pos == 0 or pos != len(text):
        msg = f"invalid duration: {value!r}"
        raise ConfigError(msg)
    return sign * total
