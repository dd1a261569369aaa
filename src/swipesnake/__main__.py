from __future__ import annotations

import argparse
import logging

from . import config
from .game import main as run_game


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="swipesnake", add_help=True)
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=config.WIDTH,
        help="Window width in pixels; the board is square and split into a 20x20 grid.",
    )
    parser.add_argument(
        "--tick-ms",
        type=_positive_int,
        default=config.TICK_MS,
        help="Milliseconds between snake moves.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < config.MIN_WIDTH:
        parser.error(f"--width must be at least {config.MIN_WIDTH}")
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run_game(width=args.width, tick_ms=args.tick_ms, seed=args.seed)


if __name__ == "__main__":
    raise SystemExit(main())
