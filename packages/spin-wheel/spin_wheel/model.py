"""WheelModel - option set, rotation angle, and winner resolution."""

from __future__ import annotations

import logging
import math
from typing import Iterable

from spin_wheel.geometry import POINTER_ANGLE, index_at, normalize, sector_spans
from spin_wheel.types import EmptyOptionSetError, Option, Sector

logger = logging.getLogger(__name__)


class WheelModel:
    """Owns the ordered options and the wheel's current rotation angle.

    The angle accumulates freely while a spin is animating and is only
    brought back into [0, 2π) by ``normalize_angle()``.
    """

    def __init__(self, options: Iterable[Option] | None = None, angle: float = 0.0) -> None:
        self._options: tuple[Option, ...] = ()
        self._angle = angle
        if options is not None:
            self.load(options)

    @property
    def options(self) -> tuple[Option, ...]:
        return self._options

    @property
    def count(self) -> int:
        return len(self._options)

    @property
    def current_angle(self) -> float:
        return self._angle

    def load(self, options: Iterable[Option]) -> None:
        """Replace the option set. Empty input leaves the current set untouched."""
        new_options = tuple(options)
        if not new_options:
            raise EmptyOptionSetError("Cannot load a wheel with no options")
        self._options = new_options
        logger.debug("Wheel loaded with %d options", len(new_options))

    def sector_angle(self) -> float:
        if not self._options:
            raise EmptyOptionSetError("Wheel has no options")
        return 2 * math.pi / len(self._options)

    def sectors(self) -> list[Sector]:
        """Sectors at the current rotation; sector i starts at angle + i * sweep."""
        if not self._options:
            return []
        spans = sector_spans(len(self._options), self._angle)
        return [
            Sector(index=i, option=option, start=start, end=end)
            for i, (option, (start, end)) in enumerate(zip(self._options, spans))
        ]

    def winner_index(self, final_angle: float) -> int:
        """Index of the sector under the pointer, clamped to [0, count - 1]."""
        if not self._options:
            raise EmptyOptionSetError("Wheel has no options")
        return index_at(POINTER_ANGLE, final_angle, len(self._options))

    def resolve_winner(self, final_angle: float) -> Option:
        """Option under the top pointer when the wheel rests at ``final_angle``."""
        return self._options[self.winner_index(final_angle)]

    def rotate_to(self, angle: float) -> None:
        self._angle = angle

    def normalize_angle(self) -> float:
        self._angle = normalize(self._angle)
        return self._angle

    def reset_angle(self) -> None:
        self._angle = 0.0
