"""Wheel renderer: sectors, labels, hub, and pointer."""
from __future__ import annotations

import math

import pygame

from spin_wheel import Option
from spin_wheel.colors import parse_hex, text_color
from spin_wheel.geometry import (
    POINTER_ANGLE,
    arc_points,
    clip_label,
    label_rotation_degrees,
    polar,
    sector_spans,
    segments_for,
)

from ui.constants import (
    HUB_BORDER,
    HUB_FILL,
    HUB_RADIUS,
    LABEL_INSET,
    POINTER_BORDER,
    POINTER_FILL,
    POINTER_H,
    POINTER_W,
    SECTOR_BORDER,
    TEXT_DIM,
    WHEEL_CENTER,
    WHEEL_RADIUS,
)


class WheelView:
    """Latest (options, angle) pushed by the engine's load and redraw hooks."""

    def __init__(self) -> None:
        self.options: tuple[Option, ...] = ()
        self.angle = 0.0

    def update(self, options: tuple[Option, ...], angle: float) -> None:
        self.options = options
        self.angle = angle


def draw_wheel(surface: pygame.Surface, view: WheelView, font: pygame.font.Font) -> None:
    """Draw every sector at the view's rotation, then the hub and pointer."""
    if not view.options:
        label = font.render("No options loaded", True, TEXT_DIM)
        surface.blit(label, label.get_rect(center=WHEEL_CENTER))
        return

    spans = sector_spans(len(view.options), view.angle)
    for option, (start, end) in zip(view.options, spans):
        points = arc_points(WHEEL_CENTER, WHEEL_RADIUS, start, end, segments_for(end - start))
        pygame.draw.polygon(surface, parse_hex(option.color), points)
        pygame.draw.polygon(surface, SECTOR_BORDER, points, 2)
        _draw_label(surface, font, option, (start + end) / 2)

    pygame.draw.circle(surface, HUB_FILL, WHEEL_CENTER, HUB_RADIUS)
    pygame.draw.circle(surface, HUB_BORDER, WHEEL_CENTER, HUB_RADIUS, 3)
    draw_pointer(surface)


def _draw_label(
    surface: pygame.Surface, font: pygame.font.Font, option: Option, mid: float,
) -> None:
    text = font.render(
        clip_label(option.display_text), True, parse_hex(text_color(option.color)),
    )
    rotated = pygame.transform.rotate(text, label_rotation_degrees(mid))
    # Right-aligned: the text's far end sits LABEL_INSET inside the rim.
    distance = WHEEL_RADIUS - LABEL_INSET - text.get_width() / 2
    surface.blit(rotated, rotated.get_rect(center=polar(WHEEL_CENTER, distance, mid)))


def draw_pointer(surface: pygame.Surface) -> None:
    """Downward triangle whose tip overlaps the rim at the top of the wheel."""
    tip = polar(WHEEL_CENTER, WHEEL_RADIUS - 8, POINTER_ANGLE)
    half = POINTER_W / 2
    top = tip[1] - POINTER_H
    points = [(tip[0] - half, top), (tip[0] + half, top), tip]
    pygame.draw.polygon(surface, POINTER_FILL, points)
    pygame.draw.polygon(surface, POINTER_BORDER, points, 2)


def hub_hit(pos: tuple[int, int]) -> bool:
    """True if ``pos`` falls inside the center hub (the spin button)."""
    cx, cy = WHEEL_CENTER
    return math.hypot(pos[0] - cx, pos[1] - cy) <= HUB_RADIUS
