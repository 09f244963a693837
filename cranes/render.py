"""
Route Rendering Utilities

Functions for printing a grid with its route and saving annotated images.
"""

from pathlib import Path as FilePath
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .solver import CellKind, Grid, Path


# Text markers for cells on the route
ROUTE_OPEN = "+"
ROUTE_CRANE = "@"

# Image colors per cell kind
CELL_COLORS = {
    CellKind.OPEN: "#f5f5f5",
    CellKind.BUILDING: "#424242",
    CellKind.CRANE: "#FFC107",
}
ROUTE_COLOR = "#d32f2f"
GRID_LINE_COLOR = "#9e9e9e"
HEADER_HEIGHT = 20


def describe_path(path: Path) -> str:
    """
    Compact step string, e.g. "EESSE".

    Args:
        path: Path to describe

    Returns:
        One letter per step ("" for the empty path)
    """
    return "".join(step.letter for step in path.steps)


def render_ascii(grid: Grid, path: Optional[Path] = None) -> str:
    """
    Render a grid as text with the route overlaid.

    Cells use '.' open, 'X' building and 'C' crane. Route cells are
    drawn as '+' (open) or '@' (crane).

    Args:
        grid: Grid to render
        path: Optional route to overlay

    Returns:
        Multi-line string, one line per row
    """
    rows = [list(line) for line in grid.to_strings()]

    if path is not None:
        for r, c in path.cells():
            if grid.get(r, c) is CellKind.CRANE:
                rows[r][c] = ROUTE_CRANE
            else:
                rows[r][c] = ROUTE_OPEN

    return "\n".join("".join(row) for row in rows)


def save_path_image(
    grid: Grid,
    path: Optional[Path],
    out_path: Union[str, FilePath],
    cell_size: int = 24
) -> None:
    """
    Save a PNG showing the grid and the route.

    Annotations include:
    - One colored square per cell (buildings dark, cranes amber)
    - Route drawn as a line through cell centers
    - Summary header with grid size and crane count

    Args:
        grid: Grid to draw
        path: Route to overlay (can be None)
        out_path: Output file path
        cell_size: Side length of one cell in pixels
    """
    if cell_size < 4:
        raise ValueError(f"cell_size must be at least 4 pixels, got {cell_size}")

    out_path = FilePath(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    width = grid.columns * cell_size
    height = grid.rows * cell_size + HEADER_HEIGHT
    image = Image.new("RGB", (max(width, 160), height), "white")
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    for r in range(grid.rows):
        for c in range(grid.columns):
            x0 = c * cell_size
            y0 = r * cell_size + HEADER_HEIGHT
            draw.rectangle(
                [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                fill=CELL_COLORS[grid.get(r, c)],
                outline=GRID_LINE_COLOR
            )

    if path is not None:
        half = cell_size // 2
        centers = [
            (c * cell_size + half, r * cell_size + HEADER_HEIGHT + half)
            for r, c in path.cells()
        ]
        if len(centers) > 1:
            draw.line(centers, fill=ROUTE_COLOR, width=max(2, cell_size // 6))
        cx, cy = centers[0]
        radius = max(2, cell_size // 5)
        draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=ROUTE_COLOR)

        summary = f"{grid.rows}x{grid.columns}, cranes: {path.total_cranes}"
    else:
        summary = f"{grid.rows}x{grid.columns}"
    draw.text((4, 4), summary, fill="black", font=font)

    image.save(str(out_path), "PNG")
