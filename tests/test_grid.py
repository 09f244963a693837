"""
Tests for the grid and path data model.

Covers:
1. Grid construction from text, lists and the random generator
2. Cell access and bounds checking
3. Path stepping, validity checks and copying
"""

import sys
from pathlib import Path as FilePath

import pytest

# Add project root to path
sys.path.insert(0, str(FilePath(__file__).parent.parent))

from cranes.solver import CellKind, Grid, Path, StepDirection


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------

def test_from_strings():
    grid = Grid.from_strings(["..C", ".X.", "c.."])

    assert grid.rows == 3
    assert grid.columns == 3
    assert grid.get(0, 2) is CellKind.CRANE
    assert grid.get(1, 1) is CellKind.BUILDING
    assert grid.get(2, 0) is CellKind.CRANE
    assert grid.get(2, 2) is CellKind.OPEN


def test_from_strings_skips_blank_lines():
    grid = Grid.from_strings(["", "  .C  ", "X.", ""])
    assert grid.to_strings() == [".C", "X."]


def test_from_strings_rejects_unknown_character():
    with pytest.raises(ValueError, match="Unknown cell character"):
        Grid.from_strings(["..?"])


def test_ragged_rows_rejected():
    with pytest.raises(ValueError, match="Row 1"):
        Grid.from_strings(["...", ".."])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        Grid.from_strings([])
    with pytest.raises(ValueError):
        Grid.from_2d_list([[]])


def test_non_cellkind_rejected():
    with pytest.raises(TypeError):
        Grid.from_2d_list([[CellKind.OPEN, "."]])


def test_get_out_of_range():
    grid = Grid.from_strings(["..", ".."])
    with pytest.raises(IndexError):
        grid.get(2, 0)
    with pytest.raises(IndexError):
        grid.get(0, -1)


def test_count_and_hash():
    grid = Grid.from_strings(["C.C", "XCX"])
    assert grid.count(CellKind.CRANE) == 3
    assert grid.count(CellKind.BUILDING) == 2
    assert grid.count(CellKind.OPEN) == 1

    same = Grid.from_strings(["C.C", "XCX"])
    assert grid == same
    assert hash(grid) == hash(same)


def test_random_is_reproducible():
    first = Grid.random(8, 5, seed=42)
    second = Grid.random(8, 5, seed=42)

    assert first == second
    assert first.rows == 8
    assert first.columns == 5
    assert first.get(0, 0) is CellKind.OPEN


def test_random_densities():
    all_cranes = Grid.random(4, 4, building_density=0.0, crane_density=1.0, seed=1)
    # Origin is forced open
    assert all_cranes.count(CellKind.CRANE) == 15

    with pytest.raises(ValueError):
        Grid.random(3, 3, building_density=0.7, crane_density=0.5)
    with pytest.raises(ValueError):
        Grid.random(0, 3)


# ---------------------------------------------------------------------------
# Path
# ---------------------------------------------------------------------------

def test_new_path_at_origin():
    path = Path(Grid.from_strings(["..", ".."]))

    assert (path.final_row, path.final_column) == (0, 0)
    assert path.total_cranes == 0
    assert len(path) == 0
    assert list(path.cells()) == [(0, 0)]


def test_origin_crane_counts():
    path = Path(Grid.from_strings(["C.", ".."]))
    assert path.total_cranes == 1


def test_add_step_updates_position_and_cranes():
    path = Path(Grid.from_strings([".C.", "..C"]))

    path.add_step(StepDirection.EAST)
    assert (path.final_row, path.final_column) == (0, 1)
    assert path.total_cranes == 1

    path.add_step(StepDirection.EAST)
    path.add_step(StepDirection.SOUTH)
    assert (path.final_row, path.final_column) == (1, 2)
    assert path.total_cranes == 2
    assert path.steps == (StepDirection.EAST, StepDirection.EAST, StepDirection.SOUTH)
    assert list(path.cells()) == [(0, 0), (0, 1), (0, 2), (1, 2)]
    assert path.reaches_destination()


def test_step_validity():
    path = Path(Grid.from_strings([".X", ".."]))

    assert not path.is_step_valid(StepDirection.EAST)   # building
    assert path.is_step_valid(StepDirection.SOUTH)

    path.add_step(StepDirection.SOUTH)
    assert not path.is_step_valid(StepDirection.SOUTH)  # out of bounds


def test_invalid_step_raises():
    path = Path(Grid.from_strings([".X", ".."]))

    with pytest.raises(ValueError, match="Invalid step EAST"):
        path.add_step(StepDirection.EAST)
    assert len(path) == 0


def test_copy_does_not_alias():
    grid = Grid.from_strings(["..", "C."])
    original = Path(grid)
    branch = original.copy()
    branch.add_step(StepDirection.SOUTH)

    assert len(original) == 0
    assert original.total_cranes == 0
    assert branch.total_cranes == 1
    assert branch != original


def test_path_refuses_building_origin():
    with pytest.raises(ValueError, match="building"):
        Path(Grid.from_strings(["XC", ".."]))
