"""Formatting helpers shared across CLI and package layers."""

from __future__ import annotations

import string

import yaml

from .constants import MAX_ASCII_AREA
from .grid import grid_positions
from .rect import Rect

CELL_LABELS = string.digits + string.ascii_lowercase + string.ascii_uppercase
OVERFLOW_LABEL = "#"
GAP_CHAR = "."


def format_rect(rect: Rect) -> str:
    """Format a rectangle as X-style geometry, e.g. ``33x33+0+34``."""
    return f"{rect.width}x{rect.height}{rect.x:+d}{rect.y:+d}"


def cell_label(index: int) -> str:
    """Single-character label for the cell at ``index``."""
    if index < len(CELL_LABELS):
        return CELL_LABELS[index]
    return OVERFLOW_LABEL


def cells_to_records(cells: list[Rect]) -> list[dict]:
    """
    Convert cells into plain dict records (one per cell, in output order).

    Args:
        cells: Cells as returned by ``compute_grid``.

    Returns:
        List of dicts with index, row, column and geometry keys.
    """
    records = []
    for index, (row, column) in enumerate(grid_positions(len(cells))):
        cell = cells[index]
        records.append({
            'index': index,
            'row': row,
            'column': column,
            'x': cell.x,
            'y': cell.y,
            'width': cell.width,
            'height': cell.height,
        })
    return records


def format_cells_yaml(cells: list[Rect]) -> str:
    return yaml.safe_dump({'cells': cells_to_records(cells)}, sort_keys=False)


def format_cells_table(cells: list[Rect]) -> str:
    """Render cells as an aligned text table."""
    headers = ['index', 'row', 'column', 'x', 'y', 'width', 'height']
    rows = [[str(record[key]) for key in headers] for record in cells_to_records(cells)]
    widths = [max([len(h)] + [len(r[i]) for r in rows]) for i, h in enumerate(headers)]

    lines = ["  ".join(h.rjust(w) for h, w in zip(headers, widths))]
    for row in rows:
        lines.append("  ".join(value.rjust(w) for value, w in zip(row, widths)))
    return "\n".join(lines)


def render_ascii(area: Rect, cells: list[Rect]) -> str:
    """
    Draw the area as a character map with each cell filled by its label.

    Gaps and unused slots are shown as ``.``; parts of degenerate cells that
    fall outside the area are clipped.

    Raises:
        ValueError: If the area exceeds MAX_ASCII_AREA units.
    """
    if area.is_empty:
        return ""
    if area.area > MAX_ASCII_AREA:
        raise ValueError(
            f"Area {area.width}x{area.height} is too large for an ascii map (max {MAX_ASCII_AREA} units)."
        )

    canvas = [[GAP_CHAR] * area.width for _ in range(area.height)]
    for index, cell in enumerate(cells):
        if not area.intersects(cell):
            continue
        clipped = area.intersection(cell)
        label = cell_label(index)
        for y in range(clipped.top, clipped.bottom):
            for x in range(clipped.left, clipped.right):
                canvas[y - area.y][x - area.x] = label

    return "\n".join("".join(line) for line in canvas)
