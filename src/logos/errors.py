from __future__ import annotations


class LogosError(Exception):
    """Base class for errors that end a run."""


class ConfigError(LogosError, ValueError):
    """Raised before any output when the run configuration is unusable."""


class SinkWriteError(LogosError):
    """Raised when the output sink rejects a write."""
