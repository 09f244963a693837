"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Tuple

from .grid import CellKind, Grid
from .path import Path
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses implement _search() and define name and description
    class attributes. Callers use solve() for the bare path or run()
    for a Solution carrying timing metrics.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for listings
    """
    name: str = "base"
    description: str = "Base strategy"

    def solve(self, grid: Grid) -> Path:
        """
        Find the path to the bottom-right cell visiting the most cranes.

        If the destination cannot be reached, the returned path is the
        empty path sitting at the origin.

        Args:
            grid: Grid to solve

        Returns:
            Best path found

        Raises:
            ValueError: If the grid violates a strategy precondition
        """
        self._check_grid(grid)
        path, _ = self._search(grid)
        return path

    def run(self, grid: Grid) -> Solution:
        """
        Solve the grid and wrap the result with metrics.

        Args:
            grid: Grid to solve

        Returns:
            Solution with path and metrics
        """
        self._check_grid(grid)
        start_time = time.perf_counter()
        path, states_explored = self._search(grid)
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.debug(
            f"{self.name}: {grid.rows}x{grid.columns} grid, "
            f"{path.total_cranes} cranes, {states_explored} states, {elapsed_ms:.2f}ms"
        )
        if not path.reaches_destination():
            logger.warning(f"{self.name}: destination unreachable, returning origin path")

        return Solution(
            path=path,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                strategy_name=self.name
            )
        )

    @abstractmethod
    def _search(self, grid: Grid) -> Tuple[Path, int]:
        """
        Compute the best path.

        Args:
            grid: Grid already checked by _check_grid

        Returns:
            (best path, number of states explored)
        """
        pass

    def _check_grid(self, grid: Grid) -> None:
        """
        Verify strategy preconditions.

        Subclasses extend this with their own limits.

        Raises:
            TypeError: If grid is not a Grid
            ValueError: If the grid is empty or its origin is a building
        """
        if not isinstance(grid, Grid):
            raise TypeError(f"Expected Grid, got {type(grid).__name__}")
        if grid.rows <= 0 or grid.columns <= 0:
            raise ValueError("Grid must be non-empty")
        if grid.get(0, 0) is CellKind.BUILDING:
            raise ValueError("Origin cell (0, 0) is a building")
