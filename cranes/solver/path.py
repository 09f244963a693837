"""
Path Module - Append-only monotonic route across a grid.
"""

from enum import Enum
from typing import Iterator, List, Tuple

from .grid import CellKind, Grid


class StepDirection(Enum):
    """
    Single-cell move direction.

    Values are (row delta, column delta).
    """
    EAST = (0, 1)
    SOUTH = (1, 0)

    @property
    def letter(self) -> str:
        """One-letter label used when printing step sequences."""
        return self.name[0]


class Path:
    """
    Monotonic route starting at the grid origin.

    A path is bound to one grid and is extended one step at a time.
    It never leaves the grid and never enters a building; add_step
    refuses any step that would.

    Attributes:
        grid: Grid the path is bound to
        final_row: Current row position
        final_column: Current column position
        total_cranes: Crane cells visited, origin included
    """

    __slots__ = ("grid", "_steps", "final_row", "final_column", "total_cranes")

    def __init__(self, grid: Grid):
        if grid.get(0, 0) is CellKind.BUILDING:
            raise ValueError("Path cannot start on a building cell")
        self.grid = grid
        self._steps: List[StepDirection] = []
        self.final_row = 0
        self.final_column = 0
        self.total_cranes = 1 if grid.get(0, 0) is CellKind.CRANE else 0

    def is_step_valid(self, direction: StepDirection) -> bool:
        """
        Check whether a step stays in bounds and avoids buildings.

        Args:
            direction: Direction to test

        Returns:
            True if add_step(direction) is allowed
        """
        d_row, d_column = direction.value
        row = self.final_row + d_row
        column = self.final_column + d_column
        if not self.grid.in_bounds(row, column):
            return False
        return self.grid.get(row, column) is not CellKind.BUILDING

    def add_step(self, direction: StepDirection) -> None:
        """
        Extend the path by one cell.

        Args:
            direction: Direction to move

        Raises:
            ValueError: If the step is not valid from the current position
        """
        if not self.is_step_valid(direction):
            raise ValueError(
                f"Invalid step {direction.name} from "
                f"({self.final_row}, {self.final_column})"
            )
        d_row, d_column = direction.value
        self.final_row += d_row
        self.final_column += d_column
        self._steps.append(direction)
        if self.grid.get(self.final_row, self.final_column) is CellKind.CRANE:
            self.total_cranes += 1

    def copy(self) -> 'Path':
        """Duplicate this path so the copy can be extended independently."""
        clone = Path.__new__(Path)
        clone.grid = self.grid
        clone._steps = list(self._steps)
        clone.final_row = self.final_row
        clone.final_column = self.final_column
        clone.total_cranes = self.total_cranes
        return clone

    @property
    def steps(self) -> Tuple[StepDirection, ...]:
        """Steps taken so far, in order."""
        return tuple(self._steps)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every visited (row, column), origin first."""
        row, column = 0, 0
        yield row, column
        for step in self._steps:
            d_row, d_column = step.value
            row += d_row
            column += d_column
            yield row, column

    def reaches_destination(self) -> bool:
        """True if the path ends at the bottom-right cell."""
        return (self.final_row == self.grid.rows - 1
                and self.final_column == self.grid.columns - 1)

    def __len__(self) -> int:
        return len(self._steps)

    def __eq__(self, other):
        if not isinstance(other, Path):
            return False
        return self.grid == other.grid and self._steps == other._steps

    def __repr__(self) -> str:
        steps = "".join(step.letter for step in self._steps)
        return (f"Path(steps='{steps}', end=({self.final_row}, {self.final_column}), "
                f"cranes={self.total_cranes})")
