"""
Grid Module - Immutable cell classification for the crane unloading problem.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np


class CellKind(Enum):
    """Classification of a single grid cell."""
    OPEN = "."
    BUILDING = "X"
    CRANE = "C"

    @classmethod
    def from_char(cls, char: str) -> 'CellKind':
        """
        Look up a cell kind from its text character.

        Args:
            char: One of '.', 'X' or 'C' (case-insensitive)

        Returns:
            Matching CellKind

        Raises:
            ValueError: If the character is not a known cell marker
        """
        try:
            return cls(char.upper())
        except ValueError:
            raise ValueError(f"Unknown cell character: {char!r}") from None


@dataclass(frozen=True)
class Grid:
    """
    Immutable rectangular grid of cells.

    Uses tuple-of-tuples so the grid is hashable and cannot be mutated
    by solvers. Dimensions are validated on construction.

    Attributes:
        cells: Tuple of rows, each a tuple of CellKind values
    """
    cells: Tuple[Tuple[CellKind, ...], ...]

    def __post_init__(self):
        if not self.cells or not self.cells[0]:
            raise ValueError("Grid must have at least one row and one column")
        width = len(self.cells[0])
        for row_index, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Row {row_index} has {len(row)} cells, expected {width}"
                )
            for cell in row:
                if not isinstance(cell, CellKind):
                    raise TypeError(f"Grid cells must be CellKind, got {cell!r}")

    @classmethod
    def from_2d_list(cls, kinds: Sequence[Sequence[CellKind]]) -> 'Grid':
        """
        Create Grid from a 2D list of cell kinds.

        Args:
            kinds: Nested sequence of CellKind values

        Returns:
            Grid instance
        """
        return cls(cells=tuple(tuple(row) for row in kinds))

    @classmethod
    def from_strings(cls, rows: Iterable[str]) -> 'Grid':
        """
        Create Grid from text rows.

        Each character is one cell: '.' open, 'X' building, 'C' crane.
        Blank lines and surrounding whitespace are ignored.

        Example:
            Grid.from_strings(["..C", ".X.", "C.."])

        Args:
            rows: Iterable of row strings

        Returns:
            Grid instance

        Raises:
            ValueError: On unknown characters, ragged rows or empty input
        """
        parsed = []
        for line in rows:
            line = line.strip()
            if not line:
                continue
            parsed.append(tuple(CellKind.from_char(ch) for ch in line))
        return cls(cells=tuple(parsed))

    @classmethod
    def random(cls, rows: int, columns: int,
               building_density: float = 0.1,
               crane_density: float = 0.2,
               seed: Optional[int] = None) -> 'Grid':
        """
        Generate a random grid.

        The origin cell is always open so every generated grid has a
        valid starting point. The destination may still be cut off.

        Args:
            rows: Number of rows (>= 1)
            columns: Number of columns (>= 1)
            building_density: Probability a cell is a building
            crane_density: Probability a cell is a crane
            seed: Optional RNG seed for reproducible grids

        Returns:
            Grid instance
        """
        if rows < 1 or columns < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{columns}")
        if building_density < 0 or crane_density < 0 or building_density + crane_density > 1:
            raise ValueError("Densities must be non-negative and sum to at most 1")

        rng = np.random.default_rng(seed)
        draws = rng.random((rows, columns))

        kinds: List[List[CellKind]] = []
        for r in range(rows):
            row = []
            for c in range(columns):
                value = draws[r, c]
                if value < building_density:
                    row.append(CellKind.BUILDING)
                elif value < building_density + crane_density:
                    row.append(CellKind.CRANE)
                else:
                    row.append(CellKind.OPEN)
            kinds.append(row)
        kinds[0][0] = CellKind.OPEN

        return cls.from_2d_list(kinds)

    @property
    def rows(self) -> int:
        """Number of rows in grid."""
        return len(self.cells)

    @property
    def columns(self) -> int:
        """Number of columns in grid."""
        return len(self.cells[0])

    def get(self, row: int, column: int) -> CellKind:
        """
        Get the kind of a cell.

        Args:
            row: Row index (0-based)
            column: Column index (0-based)

        Returns:
            CellKind at that position

        Raises:
            IndexError: If the position is outside the grid
        """
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"Cell ({row}, {column}) outside {self.rows}x{self.columns} grid"
            )
        return self.cells[row][column]

    def in_bounds(self, row: int, column: int) -> bool:
        """Check whether a position lies inside the grid."""
        return 0 <= row < self.rows and 0 <= column < self.columns

    def count(self, kind: CellKind) -> int:
        """Count cells of the given kind."""
        return sum(1 for row in self.cells for cell in row if cell is kind)

    def to_strings(self) -> List[str]:
        """Convert to text rows (inverse of from_strings)."""
        return ["".join(cell.value for cell in row) for row in self.cells]
