"""
Tests for the command-line driver.
"""

import argparse
import sys
from pathlib import Path as FilePath

import pytest

# Add project root to path
sys.path.insert(0, str(FilePath(__file__).parent.parent))

import main
from cranes.settings import DEFAULT_SETTINGS


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test where no config.json exists."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def run_cli(argv, **overrides):
    settings = dict(DEFAULT_SETTINGS, **overrides)
    return main.run(main.parse_args(argv), settings)


def test_parse_size():
    assert main.parse_size("3x5") == (3, 5)
    assert main.parse_size("10X2") == (10, 2)
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_size("3by5")
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_size("0x5")


def test_grid_file(isolated_cwd, capsys):
    grid_file = isolated_cwd / "harbor.txt"
    grid_file.write_text(".C.\nX.C\n...\n", encoding="utf-8")

    code = run_cli(["--grid", str(grid_file), "--strategy", "exhaustive"])
    out = capsys.readouterr().out

    assert code == 0
    assert "+@+" in out
    assert "Route:    EESS" in out
    assert "Cranes:   2" in out


def test_random_compare_with_image(isolated_cwd, capsys):
    image = isolated_cwd / "route.png"
    code = run_cli(
        ["--random", "5x6", "--seed", "7", "--compare", "--image", str(image)]
    )
    out = capsys.readouterr().out

    assert code == 0
    assert "Strategy: exhaustive" in out
    assert "Strategy: dyn_prog" in out
    assert "Agreement: yes" in out
    assert image.exists()


def test_unreachable_grid(isolated_cwd, capsys):
    grid_file = isolated_cwd / "walled.txt"
    grid_file.write_text("...\nXXX\n...\n", encoding="utf-8")

    code = run_cli(["--grid", str(grid_file)])

    assert code == 0
    assert "destination unreachable" in capsys.readouterr().out


def test_bad_grid_file(isolated_cwd):
    grid_file = isolated_cwd / "bad.txt"
    grid_file.write_text("..?\n", encoding="utf-8")

    assert run_cli(["--grid", str(grid_file)]) == 1
    assert run_cli(["--grid", str(isolated_cwd / "missing.txt")]) == 1


def test_exhaustive_rejects_large_grid(isolated_cwd):
    code = run_cli(["--random", "40x40", "--strategy", "exhaustive"])
    assert code == 1


def test_strategy_from_settings(isolated_cwd, capsys):
    grid_file = isolated_cwd / "harbor.txt"
    grid_file.write_text(".C\nC.\n", encoding="utf-8")

    assert run_cli(["--grid", str(grid_file)], strategy_name="exhaustive") == 0
    assert "Strategy: exhaustive" in capsys.readouterr().out


def test_building_origin_rejected(isolated_cwd):
    grid_file = isolated_cwd / "blocked.txt"
    grid_file.write_text("XC\n..\n", encoding="utf-8")

    assert run_cli(["--grid", str(grid_file)]) == 1
    assert run_cli(["--grid", str(grid_file), "--compare"]) == 1
