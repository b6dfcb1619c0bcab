"""spin-wheel - A spinning-wheel selector with eased spins and fixed-pointer winners."""

from spin_wheel.animator import SpinAnimator
from spin_wheel.clock import Clock, FixedStepClock, MonotonicClock
from spin_wheel.colors import DEFAULT_PALETTE, text_color
from spin_wheel.config import SpinConfig
from spin_wheel.easing import EASINGS
from spin_wheel.engine import WheelEngine
from spin_wheel.geometry import normalize
from spin_wheel.loader import (
    JsonOptionsLoader,
    OptionsLoader,
    StaticOptionsLoader,
    XmlOptionsLoader,
    loader_for,
)
from spin_wheel.model import WheelModel
from spin_wheel.types import (
    EmptyOptionSetError,
    InvalidColorError,
    Option,
    OptionsLoadError,
    Sector,
    SpinInProgressError,
    SpinJob,
    WheelError,
    WheelState,
)

__all__ = [
    "WheelEngine",
    "WheelModel",
    "SpinAnimator",
    "SpinConfig",
    "Clock",
    "FixedStepClock",
    "MonotonicClock",
    "EASINGS",
    "DEFAULT_PALETTE",
    "text_color",
    "normalize",
    "OptionsLoader",
    "XmlOptionsLoader",
    "JsonOptionsLoader",
    "StaticOptionsLoader",
    "loader_for",
    "Option",
    "Sector",
    "SpinJob",
    "WheelState",
    "WheelError",
    "EmptyOptionSetError",
    "InvalidColorError",
    "OptionsLoadError",
    "SpinInProgressError",
]
