"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Type

from .base import SolverStrategy
from .grid import Grid
from .solution import Solution

logger = logging.getLogger(__name__)


# Global registry of strategies
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "dyn_prog"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "exhaustive", "dyn_prog")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """Get list of available strategy names."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        "dyn_prog" if available, else first registered
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""


def compare_strategies(grid: Grid,
                       names: Optional[Iterable[str]] = None) -> Dict[str, Solution]:
    """
    Run several strategies on one grid and check that their scores agree.

    Strategies whose preconditions reject the grid are skipped with a
    warning. A score mismatch is logged as an error since every
    strategy solves the same optimum.

    Args:
        grid: Grid to solve
        names: Strategy names to run (default: all registered)

    Returns:
        Dict mapping strategy name to its Solution
    """
    solutions: Dict[str, Solution] = {}
    for name in (names if names is not None else get_strategy_names()):
        strategy = create_strategy(name)
        try:
            solutions[name] = strategy.run(grid)
        except ValueError as e:
            logger.warning(f"Skipping {name}: {e}")

    scores = {name: s.total_cranes for name, s in solutions.items()}
    if len(set(scores.values())) > 1:
        logger.error(f"Strategies disagree on optimum: {scores}")
    return solutions


def strategies_agree(solutions: Dict[str, Solution]) -> bool:
    """True if every solution has the same crane count."""
    return len({s.total_cranes for s in solutions.values()}) <= 1
