"""Driver - fixed-cadence loop that ticks an Animator."""
from __future__ import annotations

import time
from typing import Callable

from tick_motion.animator import Animator

Hook = Callable[[Animator], None]


class Driver:
    """Calls ``animator.tick()`` at ``tps`` ticks per second.

    The animator only counts calls; the driver is the one place that looks
    at the wall clock.  Any other loop (a game loop, a GUI timer) can drive
    the animator instead.
    """

    def __init__(self, animator: Animator, tps: int = 100) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._animator = animator
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested = False

    @property
    def animator(self) -> Animator:
        return self._animator

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._tick_number += 1
        self._animator.tick()

    def _start(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._animator)

    def _stop(self) -> None:
        for hook in self._stop_hooks:
            hook(self._animator)

    def step(self) -> None:
        self._tick()

    def run(self, n: int) -> None:
        self._start()
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
        self._stop()

    def run_until_idle(self, limit: int | None = None) -> int:
        """Tick until the program stops running; return the number of ticks.

        A looping program goes idle for one moment at the end of each pass,
        so this runs exactly one pass of it.  ``limit`` caps the tick count.
        """
        self._start()
        count = 0
        while limit is None or count < limit:
            self._tick()
            count += 1
            if self._stop_requested or not self._animator.running:
                break
        self._stop()
        return count

    def run_forever(self) -> None:
        self._start()
        dt = self._dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
        self._stop()
