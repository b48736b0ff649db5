from __future__ import annotations

import time
from typing import Callable

DEFAULT_TICK_RATE_S = 0.080


class CadenceTimer:
    """Tracks time since the last animation advance."""

    def __init__(
        self,
        tick_rate_s: float = DEFAULT_TICK_RATE_S,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._tick_rate_s = tick_rate_s
        self._monotonic = monotonic
        self._last_tick = monotonic()

    @property
    def tick_rate_s(self) -> float:
        return self._tick_rate_s

    def elapsed(self) -> float:
        return self._monotonic() - self._last_tick

    def poll_timeout(self) -> float:
        return max(0.0, self._tick_rate_s - self.elapsed())

    def due(self) -> bool:
        return self.elapsed() >= self._tick_rate_s

    def reset(self) -> None:
        self._last_tick = self._monotonic()
