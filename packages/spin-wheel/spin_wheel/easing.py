"""Deceleration curves mapping linear spin progress to eased progress.

Every entry starts fast and settles slowly, so a spin always comes to rest
gently whatever curve is picked.
"""
from __future__ import annotations

from typing import Callable


def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_out_cubic(t: float) -> float:
    """Default spin curve: fast start, slow settle."""
    return 1 - (1 - t) ** 3


def ease_out_quart(t: float) -> float:
    return 1 - (1 - t) ** 4


EASINGS: dict[str, Callable[[float], float]] = {
    "ease_out_quad": ease_out_quad,
    "ease_out_cubic": ease_out_cubic,
    "ease_out_quart": ease_out_quart,
}
