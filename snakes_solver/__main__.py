"""CLI entry point: python -m snakes_solver [input] [--cells N]."""

from __future__ import annotations

import argparse
import logging
import sys

from snakes_solver.board import BOARD_SIZE, InvalidCellIndex, build_board
from snakes_solver.parser import InputError, iter_test_cases
from snakes_solver.search import format_distances, min_rolls, shortest_distances

logger = logging.getLogger("snakes_solver")


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def run(text: str, total_cells: int = BOARD_SIZE, dump_distances: bool = False) -> None:
    """Solve every test case in *text*, printing one answer per line."""
    for case_no, case in enumerate(iter_test_cases(text, total_cells), start=1):
        graph = build_board(total_cells, case.ladders, case.snakes)
        distances = shortest_distances(graph)
        answer = min_rolls(distances, total_cells - 1)
        logger.debug(
            "case %d: %d ladder(s), %d snake(s) -> %d",
            case_no, len(case.ladders), len(case.snakes), answer,
        )
        print(answer, flush=True)
        if dump_distances:
            print(format_distances(distances, total_cells))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_solver",
        description="Fewest die rolls to finish a Snakes & Ladders board",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument(
        "--cells", type=int, default=BOARD_SIZE,
        help=f"Number of squares on the board (default {BOARD_SIZE})",
    )
    parser.add_argument(
        "--dump-distances", action="store_true",
        help="Print every cell's distance after each answer",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.cells < 1:
        print(f"error: --cells must be at least 1, got {args.cells}", file=sys.stderr)
        sys.exit(1)

    try:
        text = _read_input(args.input)
        run(text, total_cells=args.cells, dump_distances=args.dump_distances)
    except (InputError, InvalidCellIndex, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
