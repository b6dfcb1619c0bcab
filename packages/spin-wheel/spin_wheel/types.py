"""Shared data types and errors for the spin wheel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

IDLE = "idle"
SPINNING = "spinning"


@dataclass(frozen=True, slots=True)
class Option:
    label: str
    display_text: str
    color: str


@dataclass(frozen=True, slots=True)
class Sector:
    """Angular wedge assigned to one option, in radians."""

    index: int
    option: Option
    start: float
    end: float

    @property
    def sweep(self) -> float:
        return self.end - self.start

    @property
    def mid(self) -> float:
        return self.start + self.sweep / 2


@dataclass(frozen=True, slots=True)
class SpinJob:
    start_angle: float
    total_rotation: float
    duration_ms: float
    start_timestamp: float
    revolutions: float


@dataclass(frozen=True, slots=True)
class WheelState:
    options: tuple[Option, ...]
    current_angle: float
    is_spinning: bool


class WheelError(Exception):
    """Base class for spin wheel errors."""


class EmptyOptionSetError(WheelError, ValueError):
    """Raised when a wheel is loaded with, or queried without, any options."""


class InvalidColorError(WheelError, ValueError):
    """Raised when a color string is not a #RGB or #RRGGBB hex value."""

    def __init__(self, value: object, message: str) -> None:
        self.value = value
        super().__init__(message)


class OptionsLoadError(WheelError):
    """Raised when an options source cannot be read or parsed."""


class SpinInProgressError(WheelError):
    """Raised when the option set is replaced while a spin is running."""


RedrawHook = Callable[[tuple[Option, ...], float], None]
ResultHook = Callable[[Option], None]
