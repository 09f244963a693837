"""
Crane Route Planner - Entry Point

Solves the crane unloading problem for a grid read from a text file or
generated at random, and prints the route.

Example:
    python main.py --grid harbor.txt
    python main.py --random 6x8 --seed 3 --compare
    python main.py --random 20x20 --strategy dyn_prog --image route.png
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from cranes.solver import (
    Grid,
    Solution,
    compare_strategies,
    create_strategy,
    get_strategy_names,
    strategies_agree,
)
from cranes.render import describe_path, render_ascii, save_path_image
from cranes.settings import load_settings


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure console logging, plus a log file in debug mode."""
    handlers = [logging.StreamHandler()]
    if debug:
        handlers.append(logging.FileHandler("cranes.log", mode='w', encoding='utf-8'))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers
    )


def parse_size(text: str) -> Tuple[int, int]:
    """
    Parse a ROWSxCOLS size string.

    Raises:
        argparse.ArgumentTypeError: If the string is malformed
    """
    try:
        rows, columns = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ROWSxCOLS, got '{text}'") from None
    if rows < 1 or columns < 1:
        raise argparse.ArgumentTypeError(f"Grid size must be positive, got '{text}'")
    return rows, columns


def load_grid(args: argparse.Namespace, settings: Dict[str, Any]) -> Grid:
    """Build the grid from --grid or --random."""
    if args.grid:
        with open(args.grid, 'r', encoding='utf-8') as f:
            grid = Grid.from_strings(f.read().splitlines())
        logger.info(f"Loaded {grid.rows}x{grid.columns} grid from {args.grid}")
        return grid

    rows, columns = args.random
    seed = args.seed if args.seed is not None else settings.get("seed")
    grid = Grid.random(
        rows, columns,
        building_density=settings["building_density"],
        crane_density=settings["crane_density"],
        seed=seed
    )
    logger.info(f"Generated random {rows}x{columns} grid (seed={seed})")
    return grid


def print_solution(grid: Grid, solution: Solution) -> None:
    """Print the rendered route and its score."""
    metrics = solution.metrics
    print(render_ascii(grid, solution.path))
    print()
    print(f"Strategy: {metrics.strategy_name}")
    if solution.is_complete:
        print(f"Route:    {describe_path(solution.path) or '(start is destination)'}")
    else:
        print("Route:    destination unreachable")
    print(f"Cranes:   {solution.total_cranes}")
    print(f"Time:     {metrics.computation_time_ms:.2f}ms "
          f"({metrics.states_explored} states)")


def run(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    """
    Run the planner.

    Returns:
        Exit code
    """
    strategy_name = args.strategy or settings["strategy_name"]

    try:
        grid = load_grid(args, settings)
    except (OSError, ValueError) as e:
        logger.error(f"Could not build grid: {e}")
        return 1

    if args.compare:
        solutions = compare_strategies(grid)
        if not solutions:
            logger.error("No strategy accepted this grid")
            return 1
        for solution in solutions.values():
            print_solution(grid, solution)
            print()
        print("Agreement: " + ("yes" if strategies_agree(solutions) else "NO"))
        solution = solutions.get(strategy_name) or next(iter(solutions.values()))
    else:
        try:
            solution = create_strategy(strategy_name).run(grid)
        except ValueError as e:
            logger.error(str(e))
            return 1
        print_solution(grid, solution)

    if args.image:
        save_path_image(grid, solution.path, args.image, cell_size=settings["cell_size"])
        logger.info(f"Route image saved: {args.image}")

    return 0


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Crane Route Planner - Find the route past the most cranes"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--grid", "-g",
        type=Path,
        help="Text file with one row per line ('.' open, 'X' building, 'C' crane)"
    )
    source.add_argument(
        "--random", "-r",
        type=parse_size,
        metavar="ROWSxCOLS",
        help="Generate a random grid of this size"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Solver strategy (default: from config.json, else dyn_prog)"
    )
    parser.add_argument(
        "--compare", "-c",
        action="store_true",
        help="Run every strategy and check that they agree"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for --random"
    )
    parser.add_argument(
        "--image", "-i",
        type=Path,
        help="Save a PNG of the route to this path"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging (also written to cranes.log)"
    )
    return parser.parse_args(argv)


def main():
    """Parse arguments and run the crane route planner."""
    args = parse_args()
    settings = load_settings()
    configure_logging(args.debug or settings["debug_enabled"])
    sys.exit(run(args, settings))


if __name__ == "__main__":
    main()
