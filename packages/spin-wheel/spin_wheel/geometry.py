"""Angle arithmetic and sector geometry.

Angles follow the canvas convention: 0 points right and angles grow
clockwise (screen y axis points down). The pointer sits at the top of the
wheel, which in that convention is 3π/2.
"""

from __future__ import annotations

import math

TAU = 2 * math.pi
POINTER_ANGLE = 3 * math.pi / 2
LABEL_MAX_CHARS = 15


def normalize(angle: float) -> float:
    """Reduce ``angle`` to the canonical range [0, 2π)."""
    result = angle % TAU
    # -tiny % TAU rounds up to TAU itself
    return 0.0 if result == TAU else result


def sector_angle(count: int) -> float:
    if count <= 0:
        raise ValueError("count must be positive")
    return TAU / count


def sector_spans(count: int, rotation: float = 0.0) -> list[tuple[float, float]]:
    """Return ``count`` contiguous ``(start, end)`` spans covering one turn."""
    sweep = sector_angle(count)
    bounds = [rotation + i * sweep for i in range(count)]
    bounds.append(rotation + TAU)
    return list(zip(bounds, bounds[1:]))


def index_at(angle: float, rotation: float, count: int) -> int:
    """Index of the sector under wheel-frame ``angle`` after ``rotation``."""
    local = normalize(angle - rotation)
    index = math.floor(local / sector_angle(count))
    return min(max(index, 0), count - 1)


def polar(
    center: tuple[float, float], radius: float, angle: float,
) -> tuple[float, float]:
    cx, cy = center
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def arc_points(
    center: tuple[float, float],
    radius: float,
    start: float,
    end: float,
    segments: int = 32,
) -> list[tuple[float, float]]:
    """Polygon outline for the pie slice from ``start`` to ``end``.

    The first point is the center, followed by ``segments + 1`` points on
    the rim. Suitable for toolkits that fill polygons but not arcs.
    """
    if segments < 1:
        raise ValueError("segments must be >= 1")
    points = [center]
    step = (end - start) / segments
    for i in range(segments + 1):
        points.append(polar(center, radius, start + i * step))
    return points


def segments_for(sweep: float, per_turn: int = 180) -> int:
    """Rim resolution proportional to the sweep, at least 2 segments."""
    return max(2, math.ceil(per_turn * (abs(sweep) / TAU)))


def clip_label(text: str, max_chars: int = LABEL_MAX_CHARS) -> str:
    return text[:max_chars]


def label_rotation_degrees(mid_angle: float) -> float:
    """Counter-clockwise degrees that align text with a sector's mid line.

    Toolkits such as pygame rotate counter-clockwise with y up, so the
    clockwise canvas angle is negated.
    """
    return -math.degrees(mid_angle)
