"""Wheel App: interactive spinning-wheel selector.

Exercises spin-wheel's engine, loaders, geometry, and color helpers.

Usage:
  python main.py [options.xml|options.json|URL] [--seed N]

Controls:
  Space         Spin (also: click the center hub)
  R             Reload options from the source
  Enter/Click   Close the winner dialog
  Esc           Close the winner dialog / quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from spin_wheel import loader_for

from game.session import WheelSession
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, TPS
from ui.status import draw_result_modal, draw_status_bar
from ui.wheel import draw_wheel, hub_hit

DEFAULT_SOURCE = Path(__file__).with_name("options.xml")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Wheel App: spin a wheel of options")
    parser.add_argument(
        "source", nargs="?", default=str(DEFAULT_SOURCE),
        help="Options file or URL (default: options.xml next to this script)",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Wheel App (spin-wheel demo)")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("arial", 16, bold=True)
    small_font = pygame.font.SysFont("monospace", 13)
    title_font = pygame.font.SysFont("arial", 32, bold=True)

    session = WheelSession(loader_for(args.source), seed=args.seed)
    session.load()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if session.winner is not None:
                        session.close_result()
                    else:
                        running = False

                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    session.close_result()

                elif event.key == pygame.K_SPACE:
                    session.request_spin()

                elif event.key == pygame.K_r and session.winner is None:
                    session.load()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if session.winner is not None:
                    session.close_result()
                elif hub_hit(event.pos):
                    session.request_spin()

        # --- Tick ---
        while accumulator >= tick_interval:
            session.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_wheel(screen, session.view, font)
        draw_status_bar(
            screen,
            small_font,
            session.status,
            session.status_kind,
            spinning=session.engine.animator.is_spinning,
        )
        if session.winner is not None:
            draw_result_modal(screen, title_font, small_font, session.winner)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
