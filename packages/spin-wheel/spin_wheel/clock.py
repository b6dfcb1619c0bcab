"""Clocks that timestamp animation steps, in milliseconds."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Time source for the spin animation.

    ``advance()`` is called once per frame before ``now()`` is read.
    ``dt`` is the intended frame interval in seconds, used for pacing.
    """

    @property
    def dt(self) -> float:
        ...

    def now(self) -> float:
        ...

    def advance(self) -> None:
        ...


class FixedStepClock:
    """Deterministic frame clock: each advance moves time forward by 1/tps."""

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._frame = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame(self) -> int:
        return self._frame

    def advance(self) -> None:
        self._frame += 1

    def now(self) -> float:
        return self._frame * self._dt * 1000.0

    def reset(self, frame: int = 0) -> None:
        self._frame = frame


class MonotonicClock:
    """Wall clock backed by ``time.monotonic``; advancing is a no-op."""

    def __init__(self, tps: int = 60) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    def advance(self) -> None:
        pass

    def now(self) -> float:
        return time.monotonic() * 1000.0
