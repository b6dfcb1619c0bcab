"""Bottom status bar and the winner modal."""
from __future__ import annotations

import pygame

from spin_wheel import Option
from spin_wheel.colors import parse_hex

from ui.constants import (
    ERROR_COLOR,
    MODAL_BG,
    MODAL_BORDER,
    MODAL_SHADE,
    OK_COLOR,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)

STATUS_COLORS = {
    "info": TEXT_COLOR,
    "ok": OK_COLOR,
    "error": ERROR_COLOR,
}


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    message: str,
    kind: str,
    spinning: bool,
) -> None:
    """Draw load status on the first line and key bindings on the second."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    surface.blit(font.render(message, True, STATUS_COLORS.get(kind, TEXT_COLOR)), (8, y + 8))

    if spinning:
        keys = "Spinning...  [Esc] Quit"
    else:
        keys = "[Space/Click hub] Spin  [R] Reload  [Esc] Quit"
    surface.blit(font.render(keys, True, TEXT_DIM), (8, y + STATUS_H // 2 + 4))


def draw_result_modal(
    surface: pygame.Surface,
    title_font: pygame.font.Font,
    font: pygame.font.Font,
    winner: Option,
) -> None:
    """Dim the wheel and show the winning option in its own color."""
    shade = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    shade.fill(MODAL_SHADE)
    surface.blit(shade, (0, 0))

    box = pygame.Rect(0, 0, SCREEN_W - 80, 160)
    box.center = (SCREEN_W // 2, SCREEN_H // 2)
    pygame.draw.rect(surface, MODAL_BG, box, border_radius=10)
    pygame.draw.rect(surface, MODAL_BORDER, box, 2, border_radius=10)

    heading = font.render("Winner", True, TEXT_DIM)
    surface.blit(heading, heading.get_rect(midtop=(box.centerx, box.top + 14)))

    name = title_font.render(winner.label, True, parse_hex(winner.color))
    surface.blit(name, name.get_rect(center=(box.centerx, box.centery - 4)))

    detail = font.render(f'"{winner.display_text}"', True, TEXT_COLOR)
    surface.blit(detail, detail.get_rect(midtop=(box.centerx, box.centery + 26)))

    hint = font.render("[Enter/Click] Close", True, TEXT_DIM)
    surface.blit(hint, hint.get_rect(midbottom=(box.centerx, box.bottom - 10)))
