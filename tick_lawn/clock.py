"""Clock and TickContext for the fixed-period simulation."""

import random

from tick_lawn.types import TickContext


class Clock:
    def __init__(self, period_ms: int) -> None:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self._period_ms = period_ms
        self._tick_number = 0

    @property
    def period_ms(self) -> int:
        return self._period_ms

    @property
    def dt(self) -> float:
        """Tick period in seconds."""
        return self._period_ms / 1000

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> int:
        return self._tick_number * self._period_ms

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt_ms=self._period_ms,
            elapsed_ms=self.elapsed_ms,
            random=rng,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
