"""
Dynamic Programming Strategy - Polynomial-time optimal crane route.

Fills a table of the best crane count achievable on arrival at each
cell, then walks the table backward from the destination to recover the
route. Runs in O(rows * columns) time and space.
"""

import logging
from typing import List, Tuple

import numpy as np

from ..base import SolverStrategy
from ..grid import CellKind, Grid
from ..path import Path, StepDirection
from ..factory import register_strategy

logger = logging.getLogger(__name__)

# Table marker for cells no path can reach (buildings and cells cut off by them)
UNREACHABLE = -1


def build_score_table(grid: Grid) -> np.ndarray:
    """
    Compute the best crane count reachable at every cell.

    The table is 1-indexed with a sentinel border in row 0 and column 0
    holding UNREACHABLE, so the first real row and column need no special
    case. The start cell is seeded with its own crane bonus.

    Args:
        grid: Grid to score

    Returns:
        Integer array of shape (rows + 1, columns + 1)
    """
    table = np.full((grid.rows + 1, grid.columns + 1), UNREACHABLE, dtype=np.int64)

    for i in range(1, grid.rows + 1):
        for j in range(1, grid.columns + 1):
            cell = grid.get(i - 1, j - 1)
            if cell is CellKind.BUILDING:
                continue

            bonus = 1 if cell is CellKind.CRANE else 0
            if i == 1 and j == 1:
                table[i, j] = bonus
                continue

            best_prior = max(table[i - 1, j], table[i, j - 1])
            if best_prior != UNREACHABLE:
                table[i, j] = bonus + best_prior

    return table


def trace_back(table: np.ndarray) -> List[StepDirection]:
    """
    Recover forward step directions from a filled score table.

    Walks from the destination toward (1, 1), each time stepping back to
    the predecessor holding the larger score. Ties go to the cell above
    (a SOUTH step).

    Args:
        table: Table from build_score_table with a reachable destination

    Returns:
        Directions in forward order
    """
    x, y = table.shape[0] - 1, table.shape[1] - 1
    max_steps = x + y - 2
    reversed_steps: List[StepDirection] = []

    for _ in range(max_steps):
        if x == 1 and y == 1:
            break
        above = table[x - 1, y] if x > 1 else UNREACHABLE
        left = table[x, y - 1] if y > 1 else UNREACHABLE
        if above == UNREACHABLE and left == UNREACHABLE:
            raise ValueError(f"Cell ({x - 1}, {y - 1}) has no reachable predecessor")

        if above >= left:
            reversed_steps.append(StepDirection.SOUTH)
            x -= 1
        else:
            reversed_steps.append(StepDirection.EAST)
            y -= 1

    reversed_steps.reverse()
    return reversed_steps


@register_strategy
class DynamicProgrammingStrategy(SolverStrategy):
    """
    Dynamic programming solver.

    Algorithm:
        1. Fill the score table row by row; each open cell takes its
           crane bonus plus the better of its north and west neighbours
        2. If the destination entry is UNREACHABLE return the origin path
        3. Otherwise trace the table back to the origin and replay the
           steps forward on a fresh path
    """
    name = "dyn_prog"
    description = "Dynamic Programming (fast) - Optimal route in O(rows x columns)"

    def _search(self, grid: Grid) -> Tuple[Path, int]:
        table = build_score_table(grid)
        states_explored = grid.rows * grid.columns
        best = Path(grid)

        if table[grid.rows, grid.columns] == UNREACHABLE:
            logger.debug("Destination cell unreachable")
            return best, states_explored

        for direction in trace_back(table):
            if not best.is_step_valid(direction):
                raise RuntimeError(
                    f"Traced step {direction.name} from "
                    f"({best.final_row}, {best.final_column}) is not valid"
                )
            best.add_step(direction)

        return best, states_explored
