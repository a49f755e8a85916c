"""Command line entry point: ``python -m monty_hall -n 1000 --seed 42``."""

from .report import render_table
from .simulation import MontyHallSimulator, SimulationConfig

import argparse
import sys

from loguru import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monty_hall",
        description="Simulate Monty Hall games and compare the stay and switch strategies.",
    )
    parser.add_argument("-n", "--n-games", type=int, default=100, help="number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible games")
    parser.add_argument("--decimals", type=int, default=2, help="rounding of the printed table")
    parser.add_argument("--log-interval", type=int, default=1_000, help="games between progress logs")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"],
        help="verbosity of the log written to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    handler_id = logger.add(sys.stderr, level=args.log_level)

    try:
        try:
            config = SimulationConfig(
                n_games=args.n_games,
                seed=args.seed,
                log_interval=args.log_interval,
                decimals=args.decimals,
            )
        except ValueError as err:
            logger.error("Invalid settings: {err}", err=err)
            return 2

        batch = MontyHallSimulator(config).run()
        print(render_table(batch, config.decimals))
        return 0
    finally:
        logger.remove(handler_id)


if __name__ == "__main__":
    sys.exit(main())
