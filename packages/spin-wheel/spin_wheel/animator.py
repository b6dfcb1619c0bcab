"""SpinAnimator - spin lifecycle state machine."""

from __future__ import annotations

import logging
import random
from typing import Callable

from spin_wheel.clock import Clock
from spin_wheel.config import SpinConfig
from spin_wheel.easing import EASINGS
from spin_wheel.geometry import TAU
from spin_wheel.model import WheelModel
from spin_wheel.types import (
    IDLE,
    SPINNING,
    Option,
    RedrawHook,
    ResultHook,
    SpinJob,
)

logger = logging.getLogger(__name__)


class SpinAnimator:
    """Drives a ``WheelModel`` through one spin at a time.

    States are ``"idle"`` and ``"spinning"``. ``spin()`` creates a
    ``SpinJob`` from the configured randomization policy; each ``step()``
    eases the model angle toward the job's target and fires redraw hooks.
    The step that reaches full progress normalizes the angle, resolves the
    winner, fires result hooks and returns the winning option.
    """

    def __init__(
        self,
        model: WheelModel,
        clock: Clock,
        rng: random.Random | None = None,
        config: SpinConfig | None = None,
    ) -> None:
        self._model = model
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._config = config if config is not None else SpinConfig()
        self._easing: Callable[[float], float] = EASINGS[self._config.easing]
        self._state = IDLE
        self._job: SpinJob | None = None
        self._last_step: float | None = None
        self._redraw_hooks: list[RedrawHook] = []
        self._result_hooks: list[ResultHook] = []

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_spinning(self) -> bool:
        return self._state == SPINNING

    @property
    def job(self) -> SpinJob | None:
        return self._job

    @property
    def config(self) -> SpinConfig:
        return self._config

    def on_redraw(self, hook: RedrawHook) -> None:
        self._redraw_hooks.append(hook)

    def on_result(self, hook: ResultHook) -> None:
        self._result_hooks.append(hook)

    def _draw_revolutions(self) -> float:
        cfg = self._config
        if cfg.continuous_revolutions:
            return self._rng.uniform(cfg.min_revolutions, cfg.max_revolutions)
        return self._rng.randint(cfg.min_revolutions, cfg.max_revolutions)

    def spin(self) -> SpinJob | None:
        """Start a spin. Returns None, changing nothing, if one cannot start."""
        if self._state == SPINNING:
            logger.debug("Spin requested while spinning; ignored")
            return None
        if self._model.count == 0:
            logger.debug("Spin requested on an empty wheel; ignored")
            return None

        cfg = self._config
        duration = self._rng.uniform(cfg.min_duration_ms, cfg.max_duration_ms)
        revolutions = self._draw_revolutions()
        total = revolutions * TAU + self._rng.random() * TAU
        now = self._clock.now()
        self._job = SpinJob(
            start_angle=self._model.current_angle,
            total_rotation=total,
            duration_ms=duration,
            start_timestamp=now,
            revolutions=revolutions,
        )
        self._last_step = now
        self._state = SPINNING
        logger.debug(
            "Spin started: %.0fms, %s revolutions, %.3f rad total",
            duration, revolutions, total,
        )
        return self._job

    def progress(self, now: float) -> float:
        """Linear progress of the current job at ``now``, in [0, 1]."""
        job = self._job
        if job is None:
            return 0.0
        elapsed = now - job.start_timestamp
        return min(max(elapsed / job.duration_ms, 0.0), 1.0)

    def angle_at(self, progress: float) -> float:
        job = self._job
        if job is None:
            return self._model.current_angle
        return job.start_angle + job.total_rotation * self._easing(progress)

    def step(self, now: float | None = None) -> Option | None:
        """Advance the animation to ``now`` (defaults to the clock's time).

        Steps that do not move time strictly forward are ignored. Returns
        the winning option on the completing step, otherwise None.
        """
        if self._state != SPINNING:
            return None
        if now is None:
            now = self._clock.now()
        if self._last_step is not None and now <= self._last_step:
            return None
        self._last_step = now

        progress = self.progress(now)
        self._model.rotate_to(self.angle_at(progress))
        if not self._fire_redraw():
            return None
        if progress < 1.0:
            return None
        return self._finish()

    def cancel(self) -> bool:
        """Discard the in-flight spin without producing a winner."""
        if self._state != SPINNING:
            return False
        self._reset()
        logger.info("Spin cancelled at %.3f rad", self._model.current_angle)
        return True

    def _reset(self) -> None:
        self._state = IDLE
        self._job = None
        self._last_step = None
        self._model.normalize_angle()

    def _finish(self) -> Option:
        self._reset()
        winner = self._model.resolve_winner(self._model.current_angle)
        logger.info(
            "Spin finished at %.3f rad: %s", self._model.current_angle, winner.label,
        )
        for hook in self._result_hooks:
            try:
                hook(winner)
            except Exception:
                logger.exception("Result hook %r failed", hook)
        return winner

    def _fire_redraw(self) -> bool:
        """Run redraw hooks. A failing hook aborts the spin."""
        options = self._model.options
        angle = self._model.current_angle
        for hook in self._redraw_hooks:
            try:
                hook(options, angle)
            except Exception:
                logger.exception("Redraw hook %r failed; aborting spin", hook)
                self._reset()
                return False
        return True
