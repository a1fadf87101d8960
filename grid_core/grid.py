"""Grid layout helpers for arranging N items inside a rectangular area."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from .constants import VALID_REMAINDER_POLICIES
from .rect import Rect

logger = logging.getLogger("autogrid")


def calculate_grid_shape(count: int) -> tuple[int, int]:
    """
    Calculate a near-square grid shape (rows, columns) for ``count`` items.

    Columns are the rounded-up square root of the count, rows whatever is
    then needed to hold every item, so grids are never taller than wide.

    Args:
        count: Number of items to arrange.

    Returns:
        tuple[int, int]: (rows, columns); (0, 0) when count is zero.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return (0, 0)

    columns = math.isqrt(count)
    if columns * columns < count:
        columns += 1
    rows = -(-count // columns)
    return (rows, columns)


def split_bands(
    start: int,
    length: int,
    parts: int,
    spacing: int = 0,
    remainder: str = "last",
) -> list[tuple[int, int]]:
    """
    Split a 1-D span into ``parts`` bands separated by ``spacing``.

    Args:
        start: Offset of the span.
        length: Length of the span.
        parts: Number of bands.
        spacing: Gap between adjacent bands (none at the outer edges).
        remainder: 'last' puts all leftover units into the final band,
            'even' hands them out one per band from the first.

    Returns:
        list[tuple[int, int]]: (offset, size) per band. Sizes never go below zero.
    """
    if remainder not in VALID_REMAINDER_POLICIES:
        allowed = ", ".join(VALID_REMAINDER_POLICIES)
        raise ValueError(f"Unknown remainder policy '{remainder}'. Use one of: {allowed}.")
    if parts <= 0:
        return []

    available = length - spacing * (parts - 1)
    base = available // parts
    leftover = available - base * parts

    if remainder == "last":
        sizes = [base] * parts
        sizes[-1] += leftover
    else:
        sizes = [base + 1 if index < leftover else base for index in range(parts)]

    bands = []
    offset = start
    for size in sizes:
        size = max(size, 0)
        bands.append((offset, size))
        offset += size + spacing
    return bands


def grid_positions(count: int) -> Iterator[tuple[int, int]]:
    """Yield (row, column) for the first ``count`` slots in row-major order."""
    _, columns = calculate_grid_shape(count)
    for index in range(count):
        yield divmod(index, columns)


def compute_grid(area: Rect, count: int, spacing: int = 0, remainder: str = "last") -> list[Rect]:
    """
    Arrange ``count`` cells in an automatic grid inside ``area``.

    Args:
        area: Rectangle to subdivide.
        count: Number of cells to produce.
        spacing: Gap between adjacent cells, horizontally and vertically.
        remainder: Remainder policy passed to :func:`split_bands`.

    Returns:
        list[Rect]: Exactly ``count`` cells in row-major order (left-to-right,
        top-to-bottom). Unused slots of the final row are dropped.

    Raises:
        ValueError: If count or spacing is negative, or the remainder policy is unknown.
    """
    if spacing < 0:
        raise ValueError(f"spacing must be >= 0, got {spacing}")
    rows, columns = calculate_grid_shape(count)
    if count == 0:
        return []

    row_bands = split_bands(area.y, area.height, rows, spacing, remainder)
    col_bands = split_bands(area.x, area.width, columns, spacing, remainder)

    if area.width < spacing * (columns - 1) or area.height < spacing * (rows - 1):
        logger.debug(
            "Spacing %d leaves no room for a %dx%d grid in %dx%d area; cells degenerate",
            spacing, columns, rows, area.width, area.height,
        )

    cells = []
    for row_y, row_h in row_bands:
        for col_x, col_w in col_bands:
            if len(cells) == count:
                return cells
            cells.append(Rect(col_x, row_y, col_w, row_h))
    return cells
