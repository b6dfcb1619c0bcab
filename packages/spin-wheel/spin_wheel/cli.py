"""Headless spin-wheel command line.

Usage:
    spin-wheel options.xml
    spin-wheel https://example.com/options.json --spins 3 --json
    spin-wheel options.xml --seed 7 --realtime -v
    spin-wheel options.xml --easing ease_out_quart
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from spin_wheel.clock import MonotonicClock
from spin_wheel.config import SpinConfig
from spin_wheel.easing import EASINGS
from spin_wheel.engine import WheelEngine
from spin_wheel.loader import loader_for
from spin_wheel.types import Option, WheelError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spin-wheel",
        description="Spin a wheel of options loaded from an XML or JSON source.",
    )
    parser.add_argument("source", help="Path or http(s) URL of a .xml or .json options file")
    parser.add_argument(
        "--spins", type=int, default=1,
        help="Number of consecutive spins (default: 1)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="RNG seed for reproducible spins (default: random)",
    )
    parser.add_argument(
        "--tps", type=int, default=60,
        help="Animation frames per second (default: 60)",
    )
    parser.add_argument(
        "--realtime", action="store_true",
        help="Animate against the wall clock instead of simulated frames",
    )
    parser.add_argument(
        "--min-duration", type=float, default=3000.0,
        help="Shortest spin in milliseconds (default: 3000)",
    )
    parser.add_argument(
        "--max-duration", type=float, default=6000.0,
        help="Longest spin in milliseconds (default: 6000)",
    )
    parser.add_argument(
        "--continuous", action="store_true",
        help="Draw revolutions from a continuous range instead of whole turns",
    )
    parser.add_argument(
        "--easing", choices=sorted(EASINGS), default="ease_out_cubic",
        help="Deceleration curve for the spin (default: ease_out_cubic)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print one JSON object per winner",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def format_winner(option: Option, as_json: bool = False) -> str:
    if as_json:
        return json.dumps({
            "label": option.label,
            "text": option.display_text,
            "color": option.color,
        })
    if option.display_text == option.label:
        return option.label
    return f"{option.label}: {option.display_text}"


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        config = SpinConfig(
            min_duration_ms=args.min_duration,
            max_duration_ms=args.max_duration,
            continuous_revolutions=args.continuous,
            easing=args.easing,
        )
    except ValueError as exc:
        print(f"spin-wheel: {exc}", file=sys.stderr)
        return 2

    clock = MonotonicClock(args.tps) if args.realtime else None
    engine = WheelEngine(tps=args.tps, seed=args.seed, config=config, clock=clock)
    logger.debug("Engine seed %d", engine.seed)

    try:
        engine.load(loader_for(args.source))
    except WheelError as exc:
        print(f"spin-wheel: {exc}", file=sys.stderr)
        return 1

    for _ in range(args.spins):
        engine.spin()
        winner = engine.run_until_idle(paced=args.realtime)
        if winner is None:
            print("spin-wheel: spin did not complete", file=sys.stderr)
            return 1
        print(format_winner(winner, args.json))
    return 0
