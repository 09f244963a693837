"""
Benchmark script for crane unloading strategies.

Times every registered strategy on random square grids of growing size
and checks that the strategies agree wherever they all run.

Usage:
    python tools/benchmark.py [--max-size N] [--exhaustive-limit N] [--seed N]
"""

import sys
import argparse
import logging
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cranes.solver import Grid, create_strategy, get_strategy_names

logger = logging.getLogger(__name__)


def benchmark(max_size: int, exhaustive_limit: int, seed: int, repeats: int) -> bool:
    """
    Run the benchmark table.

    Args:
        max_size: Largest square grid side to test
        exhaustive_limit: Largest side the exhaustive strategy is run on
        seed: Base random seed
        repeats: Grids per size (median time is reported)

    Returns:
        True if every compared grid produced agreeing scores
    """
    names = get_strategy_names()
    header = f"{'size':>6} " + " ".join(f"{name:>14}" for name in names)
    print(header)
    print("-" * len(header))

    all_agree = True
    for size in range(1, max_size + 1):
        timings = {name: [] for name in names}
        for repeat in range(repeats):
            grid = Grid.random(size, size, seed=seed + size * 1000 + repeat)
            scores = set()
            for name in names:
                if name == "exhaustive" and size > exhaustive_limit:
                    continue
                solution = create_strategy(name).run(grid)
                timings[name].append(solution.metrics.computation_time_ms)
                scores.add(solution.total_cranes)
            if len(scores) > 1:
                logger.error(f"Disagreement on {size}x{size} grid (repeat {repeat}): {scores}")
                all_agree = False

        cells = []
        for name in names:
            if timings[name]:
                cells.append(f"{np.median(timings[name]):>12.3f}ms")
            else:
                cells.append(f"{'--':>14}")
        print(f"{size:>6} " + " ".join(cells))

    return all_agree


def main():
    """Parse arguments and run the benchmark."""
    parser = argparse.ArgumentParser(description="Time crane unloading strategies")
    parser.add_argument("--max-size", type=int, default=16, help="Largest grid side")
    parser.add_argument("--exhaustive-limit", type=int, default=11,
                        help="Largest grid side for the exhaustive strategy")
    parser.add_argument("--seed", type=int, default=0, help="Base random seed")
    parser.add_argument("--repeats", type=int, default=3, help="Grids per size")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    ok = benchmark(args.max_size, args.exhaustive_limit, args.seed, args.repeats)
    print()
    print("All strategies agree" if ok else "Strategies DISAGREE")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
