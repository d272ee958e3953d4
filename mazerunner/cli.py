"""
Command-line entry point for Maze Runner.

Usage:
    mazerunner -i mazes/small.txt
    mazerunner --input mazes/small.txt --strategy right-hand --log-level DEBUG

Prints the factorized path on stdout. Logs and errors go to stderr.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from mazerunner.config import get_settings
from mazerunner.core import (
    MazeLoadError,
    MazeSolver,
    MazeUnsolvableError,
    NoEntryOrExitError,
    available_strategies,
    get_strategy,
)

logger = logging.getLogger("mazerunner")

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_NO_ENTRY_OR_EXIT = 3
EXIT_UNSOLVABLE = 4


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="mazerunner",
        description="Solve a maze with the right-hand rule and print the factorized path.",
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        metavar="PATH",
        help="Maze file path",
    )
    parser.add_argument(
        "-s",
        "--strategy",
        default=settings.default_strategy,
        help=f"Solving strategy (available: {', '.join(available_strategies())})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level for stderr output",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    strategy = get_strategy(args.strategy, step_limit_factor=settings.step_limit_factor)
    solver = MazeSolver(args.input, strategy=strategy, settings=settings)

    try:
        solver.load_maze()
    except MazeLoadError as e:
        print(f"Failed to load maze from file: {args.input} ({e})", file=sys.stderr)
        return EXIT_LOAD_ERROR
    except NoEntryOrExitError as e:
        print(f"Maze has no entry or exit: {e}", file=sys.stderr)
        return EXIT_NO_ENTRY_OR_EXIT

    solver.display_maze()

    try:
        path = solver.solve_maze()
    except MazeUnsolvableError as e:
        print(
            f"Failed to solve maze: no valid path found or step limit exceeded ({e})",
            file=sys.stderr,
        )
        return EXIT_UNSOLVABLE

    print(path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
