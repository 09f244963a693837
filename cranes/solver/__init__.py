"""
Solver Package - Crane unloading route solvers.

Finds the east/south route from the top-left to the bottom-right cell of
a grid that passes the most cranes without entering a building. Two
interchangeable strategies are registered and must agree on the optimum.

Public API:
    - Grid, CellKind: Immutable grid representation
    - Path, StepDirection: Monotonic route builder
    - Solution, SolutionMetrics: Result of a timed strategy run
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata
    - compare_strategies(): Run several strategies on one grid

Usage:
    from cranes.solver import Grid, create_strategy

    grid = Grid.from_strings(["..C", ".X.", "C.."])

    strategy = create_strategy("dyn_prog")
    path = strategy.solve(grid)

    print(f"{path.total_cranes} cranes in {len(path)} steps")
"""

# Core data structures
from .grid import CellKind, Grid
from .path import Path, StepDirection
from .solution import Solution, SolutionMetrics

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    compare_strategies,
    strategies_agree,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "CellKind",
    "Grid",
    "Path",
    "StepDirection",
    "Solution",
    "SolutionMetrics",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "compare_strategies",
    "strategies_agree",
]
