from __future__ import annotations

import argparse
import logging
import random

from . import config
from .game import play
from .logic import new_game


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="toroid-snake",
        description="Snake on a wrap-around grid. WASD or arrows to steer, Q or Esc to quit.",
    )
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Grid height in cells.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    try:
        state = new_game(grid=(args.width, args.height), rng=rng)
    except ValueError as e:
        parser.error(str(e))

    print(play(state, rng=rng))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
