from __future__ import annotations

from random import Random
from typing import Protocol

from logos.errors import SinkWriteError

ALPHABET = b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.- "
NEWLINE = b"\n"


class Sink(Protocol):
    def write(self, data: bytes, /) -> int | None:
        ...


class RandomAlphabetPool:
    """Pre-generated newline-terminated blocks of random printable bytes.

    Output is assembled from these blocks so that large volumes can be written
    without drawing a random number per character. Blocks are picked with
    replacement on every write.
    """

    __slots__ = ("_buffers", "_rng", "block_size")

    def __init__(self, rng: Random, pool_size: int, block_size: int) -> None:
        self._rng = rng
        self.block_size = block_size
        self._buffers = tuple(self._fill(rng, block_size) for _ in range(pool_size))

    @staticmethod
    def _fill(rng: Random, block_size: int) -> bytes:
        body = bytes(rng.choices(ALPHABET, k=block_size - 1))
        return body + NEWLINE

    @property
    def buffers(self) -> tuple[bytes, ...]:
        return self._buffers

    def pick(self) -> bytes:
        return self._rng.choice(self._buffers)

    def write_n(self, sink: Sink, n: int) -> int:
        """Write exactly ``n`` bytes to ``sink`` and return the count written."""
        remaining = n
        while remaining > 0:
            buf = self.pick()
            # A partial block is taken from the tail so it still ends in a newline.
            chunk = buf[-remaining:] if len(buf) > remaining else buf
            try:
                written = sink.write(chunk)
            except OSError as exc:
                msg = f"write to output failed after {n - remaining} of {n} bytes"
                raise SinkWriteError(msg) from exc
            if written is None:
                written = len(chunk)
            if written <= 0:
                msg = f"output accepted no bytes after {n - remaining} of {n}"
                raise SinkWriteError(msg)
            remaining -= written
        return max(0, n)
