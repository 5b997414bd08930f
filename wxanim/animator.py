"""Time-driven animation of a set of eased values."""

from __future__ import annotations

import time
from typing import Callable, List, Optional

from wxanim.easing import AnimatedValue

TIMER_INTERVAL_MS = 10

Schedule = Callable[[int, Callable[[], None]], object]


class Animator:
    """Advances animated values on a repeating timer until the duration elapses.

    ``schedule(delay_ms, callback)`` arranges for ``callback`` to run later
    (``tkinter.Misc.after`` fits). Without it, call :meth:`tick` yourself.
    ``clock`` returns monotonic time in seconds.
    """

    def __init__(
        self,
        schedule: Optional[Schedule] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._schedule = schedule
        self._clock = clock
        self.animated_values: List[AnimatedValue] = []
        self.on_iteration: Optional[Callable[[], None]] = None
        self.on_stop: Optional[Callable[[], None]] = None
        self._running = False
        self._start_time = 0.0
        self._duration_ms = 0.0
        self._generation = 0

    def start(self, duration_ms: float) -> None:
        """Start animating over ``duration_ms`` milliseconds."""
        if not self.animated_values:
            raise RuntimeError("No animated values")
        if duration_ms <= 0:
            raise ValueError("Duration must be positive")
        self._duration_ms = float(duration_ms)
        self._start_time = self._clock()
        self._running = True
        self._generation += 1
        self._schedule_next()

    def stop(self) -> None:
        """Stop the timer and report the stop."""
        self._running = False
        self._generation += 1
        if self.on_stop is not None:
            self.on_stop()

    def reset(self) -> None:
        """Report every value at its start position."""
        for value in self.animated_values:
            value.notify(0.0, value.start_value)

    def is_running(self) -> bool:
        return self._running

    def tick(self) -> bool:
        """Advance one timer step; return whether the animation is still running."""
        if not self._running:
            return False
        elapsed_ms = int((self._clock() - self._start_time) * 1000)
        if elapsed_ms >= self._duration_ms:
            self.stop()
            return False
        t_norm = elapsed_ms / self._duration_ms
        for value in self.animated_values:
            value.notify(t_norm, value.value_at(t_norm))
        if self.on_iteration is not None:
            self.on_iteration()
        return True

    def _schedule_next(self) -> None:
        if self._schedule is None:
            return
        generation = self._generation
        self._schedule(TIMER_INTERVAL_MS, lambda: self._on_timer(generation))

    def _on_timer(self, generation: int) -> None:
        if generation != self._generation or not self._running:
            return
        self.tick()
        if self._running and generation == self._generation:
            self._schedule_next()