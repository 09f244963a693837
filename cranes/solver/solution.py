"""
Solution Module - Result of a strategy run with performance metrics.
"""

from dataclasses import dataclass, field

from .path import Path


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Partial paths or table cells evaluated
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy run.

    Attributes:
        path: Best path found by the strategy
        metrics: Performance statistics
    """
    path: Path
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def total_cranes(self) -> int:
        """Cranes visited by the path."""
        return self.path.total_cranes

    @property
    def step_count(self) -> int:
        """Number of steps in the path."""
        return len(self.path)

    @property
    def is_complete(self) -> bool:
        """True if the path reaches the destination cell."""
        return self.path.reaches_destination()
