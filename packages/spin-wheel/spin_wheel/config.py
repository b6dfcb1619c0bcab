"""Spin configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from spin_wheel.easing import EASINGS


@dataclass(frozen=True)
class SpinConfig:
    """Immutable randomization policy for spins.

    Attributes:
        min_duration_ms: Shortest spin, in milliseconds.
        max_duration_ms: Longest spin, in milliseconds.
        min_revolutions: Fewest full turns before the fractional remainder.
        max_revolutions: Most full turns before the fractional remainder.
        continuous_revolutions: Draw revolutions from the continuous range
            [min, max) instead of an inclusive integer range.
        easing: Name of the entry in ``EASINGS`` applied to progress.
    """

    min_duration_ms: float = 3000.0
    max_duration_ms: float = 6000.0
    min_revolutions: int = 5
    max_revolutions: int = 10
    continuous_revolutions: bool = False
    easing: str = "ease_out_cubic"

    def __post_init__(self) -> None:
        if self.min_duration_ms <= 0:
            raise ValueError("min_duration_ms must be positive")
        if self.max_duration_ms < self.min_duration_ms:
            raise ValueError("max_duration_ms must be >= min_duration_ms")
        if self.min_revolutions < 0:
            raise ValueError("min_revolutions must be non-negative")
        if self.max_revolutions < self.min_revolutions:
            raise ValueError("max_revolutions must be >= min_revolutions")
        if self.easing not in EASINGS:
            raise ValueError(
                f"Unknown easing {self.easing!r}, expected one of {sorted(EASINGS)}"
            )
