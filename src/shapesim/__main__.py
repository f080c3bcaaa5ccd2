from __future__ import annotations

import argparse

from . import config, presets
from .log import LOG_LEVELS, setup_default_logging


def positive_int(value: str) -> int:
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return n


def positive_float(value: str) -> float:
    x = float(value)
    if x <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return x


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapesim",
        description="Bouncing and target-seeking shapes in a pygame window.",
    )
    parser.add_argument("--list", action="store_true", help="List available presets and exit.")
    parser.add_argument(
        "--preset",
        choices=presets.names(),
        default=config.DEFAULT_PRESET,
        help="Starting scene.",
    )
    parser.add_argument("--width", type=positive_int, default=config.WIDTH)
    parser.add_argument("--height", type=positive_int, default=config.HEIGHT)
    parser.add_argument("--fps", type=positive_int, default=config.FPS, help="Frame rate cap.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for new seek targets.")
    parser.add_argument(
        "--max-dt",
        type=positive_float,
        default=config.MAX_DT,
        help="Longest single step in seconds (default: unlimited).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        for name in presets.names():
            print(name)
        return 0

    setup_default_logging(args.log_level)

    # pygame is only needed once we actually open a window.
    from .game import main as run_game

    run_game(
        width=args.width,
        height=args.height,
        fps=args.fps,
        preset=args.preset,
        seed=args.seed,
        max_dt=args.max_dt,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
