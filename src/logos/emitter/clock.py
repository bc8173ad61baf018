from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float:
        ...

    async def sleep_until(self, deadline: float) -> None:
        ...


class MonotonicClock:
    """Wall pacing on the running event loop's monotonic clock."""

    def now(self) -> float:
        return asyncio.get_running_loop().time()

    async def sleep_until(self, deadline: float) -> None:
        delay = max(0.0, deadline - self.now())
        if delay > 0:
            await asyncio.sleep(delay)


@dataclass(slots=True)
class ManualClock:
    """Virtual time that jumps straight to each deadline."""

    current: float = 0.0

    def now(self) -> float:
        return self.current

    async def sleep_until(self, deadline: float) -> None:
        if deadline > self.current:
            self.current = deadline
        await asyncio.sleep(0)

    def advance(self, seconds: float) -> None:
        self.current += seconds
