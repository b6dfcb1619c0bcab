"""WheelEngine - frame loop, pacing, and lifecycle hooks for one wheel."""

from __future__ import annotations

import logging
import os
import random
import time
from typing import Iterable

from spin_wheel.animator import SpinAnimator
from spin_wheel.clock import Clock, FixedStepClock
from spin_wheel.config import SpinConfig
from spin_wheel.loader import OptionsLoader
from spin_wheel.model import WheelModel
from spin_wheel.types import (
    Option,
    OptionsLoadError,
    RedrawHook,
    ResultHook,
    SpinInProgressError,
    SpinJob,
    WheelState,
)

logger = logging.getLogger(__name__)


class WheelEngine:
    def __init__(
        self,
        tps: int = 60,
        seed: int | None = None,
        config: SpinConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock if clock is not None else FixedStepClock(tps)
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._model = WheelModel()
        self._animator = SpinAnimator(self._model, self._clock, self._rng, config)
        self._loader: OptionsLoader | None = None
        self._load_hooks: list[RedrawHook] = []

    @property
    def model(self) -> WheelModel:
        return self._model

    @property
    def animator(self) -> SpinAnimator:
        return self._animator

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def can_spin(self) -> bool:
        return self._model.count > 0 and not self._animator.is_spinning

    @property
    def state(self) -> WheelState:
        return WheelState(
            options=self._model.options,
            current_angle=self._model.current_angle,
            is_spinning=self._animator.is_spinning,
        )

    def on_redraw(self, hook: RedrawHook) -> None:
        """Register a renderer called with ``(options, angle)`` every frame of a spin."""
        self._animator.on_redraw(hook)

    def on_result(self, hook: ResultHook) -> None:
        self._animator.on_result(hook)

    def on_load(self, hook: RedrawHook) -> None:
        """Register a hook called with ``(options, angle)`` after a successful load."""
        self._load_hooks.append(hook)

    def load(self, source: OptionsLoader | Iterable[Option]) -> tuple[Option, ...]:
        """Replace the wheel's options from a loader or an option sequence.

        Raises ``SpinInProgressError`` during a spin. Loader and empty-set
        errors propagate with the previous options still in place. Once the
        options are replaced the load has succeeded; a failing load hook is
        logged and does not undo it.
        """
        if self._animator.is_spinning:
            raise SpinInProgressError("Cannot replace options while the wheel is spinning")
        if isinstance(source, OptionsLoader):
            options = source.load()
            self._model.load(options)
            self._loader = source
        else:
            self._model.load(source)
        logger.info("Loaded %d options", self._model.count)
        for hook in self._load_hooks:
            try:
                hook(self._model.options, self._model.current_angle)
            except Exception:
                logger.exception("Load hook %r failed", hook)
        return self._model.options

    def reload(self) -> tuple[Option, ...]:
        """Load again from the most recent loader."""
        if self._loader is None:
            raise OptionsLoadError("No options source to reload from")
        return self.load(self._loader)

    def spin(self) -> SpinJob | None:
        return self._animator.spin()

    def cancel(self) -> bool:
        return self._animator.cancel()

    def step(self) -> Option | None:
        """Advance one frame. Returns the winner on the frame a spin ends."""
        self._clock.advance()
        return self._animator.step(self._clock.now())

    def run(self, n: int) -> Option | None:
        """Advance up to ``n`` frames, stopping early when a spin completes."""
        for _ in range(n):
            winner = self.step()
            if winner is not None:
                return winner
        return None

    def run_until_idle(self, paced: bool = False, max_steps: int | None = None) -> Option | None:
        """Step until the current spin completes.

        With ``paced=True`` frames are spaced by the clock's ``dt`` in real
        time. Returns the winner, or None if nothing was spinning or the
        spin was aborted.
        """
        dt = self._clock.dt
        steps = 0
        while self._animator.is_spinning:
            if max_steps is not None and steps >= max_steps:
                break
            start = time.monotonic()
            winner = self.step()
            steps += 1
            if winner is not None:
                return winner
            if paced:
                sleep_time = dt - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        return None
