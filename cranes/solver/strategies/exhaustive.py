"""
Exhaustive Strategy - Breadth-first enumeration of every monotonic path.

Expands all partial paths one level (one step) at a time and keeps the
best path that reaches the destination. Cost grows with the number of
monotonic paths, binomial(rows + columns - 2, rows - 1), so this is only
practical for small grids; it serves as the reference answer for the
dynamic programming strategy.
"""

import logging
from collections import deque
from typing import Deque, Tuple

from ..base import SolverStrategy
from ..grid import Grid
from ..path import Path, StepDirection
from ..factory import register_strategy

logger = logging.getLogger(__name__)

# Longest path (in steps) the search accepts.
MAX_PATH_STEPS = 63


@register_strategy
class ExhaustiveStrategy(SolverStrategy):
    """
    Exhaustive breadth-first search over all monotonic paths.

    Algorithm:
        1. Start with a frontier holding the empty path at the origin
        2. For each step count up to rows + columns - 2:
           - Stop once the best path sits at the destination
           - Drain the frontier: destination paths compete for best,
             others are cloned and extended east and south where valid
        3. Return the best path (the origin path if nothing arrived)

    Ties keep the earliest destination path found.
    """
    name = "exhaustive"
    description = "Exhaustive (exponential) - Enumerates every monotonic path"

    def _check_grid(self, grid: Grid) -> None:
        super()._check_grid(grid)
        max_steps = grid.rows + grid.columns - 2
        if max_steps > MAX_PATH_STEPS:
            raise ValueError(
                f"Grid {grid.rows}x{grid.columns} needs {max_steps} steps, "
                f"exhaustive search is limited to {MAX_PATH_STEPS}"
            )

    def _search(self, grid: Grid) -> Tuple[Path, int]:
        max_steps = grid.rows + grid.columns - 2

        best = Path(grid)
        frontier: Deque[Path] = deque([best])
        states_explored = 0

        for steps in range(max_steps + 1):
            if best.reaches_destination():
                break

            next_frontier: Deque[Path] = deque()
            while frontier:
                current = frontier.popleft()
                states_explored += 1

                if current.reaches_destination():
                    # The origin path is only a placeholder until something arrives
                    if (not best.reaches_destination()
                            or current.total_cranes > best.total_cranes):
                        best = current
                    continue

                for direction in (StepDirection.EAST, StepDirection.SOUTH):
                    if current.is_step_valid(direction):
                        branch = current.copy()
                        branch.add_step(direction)
                        next_frontier.append(branch)

            frontier = next_frontier
            logger.debug(f"Level {steps}: {len(frontier)} partial paths")

        return best, states_explored
