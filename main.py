"""
main.py - Entry point.

Run with:
    python main.py [--seed N] [--fps N]

Requires:
    pip install pygame
"""

import argparse
import sys
from typing import Iterable, Optional

from snakegame.config import FPS
from snakegame.controller import GameController


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic single-player Snake")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for food placement (same seed, same food sequence)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=FPS,
        help="Frames drawn per second; tick speed is set by the score",
    )
    return parser.parse_args(list(argv))


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    GameController(fps=args.fps, seed=args.seed).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
