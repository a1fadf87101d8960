"""Core grid geometry and shared helpers for autogrid."""

from .config import (
    CoreConfigService,
    load_preview_settings,
    load_runtime_paths,
)
from .formatting import (
    cells_to_records,
    format_cells_table,
    format_cells_yaml,
    format_rect,
    render_ascii,
)
from .grid import calculate_grid_shape, compute_grid, grid_positions, split_bands
from .rect import Rect

__all__ = [
    "calculate_grid_shape",
    "cells_to_records",
    "compute_grid",
    "CoreConfigService",
    "format_cells_table",
    "format_cells_yaml",
    "format_rect",
    "grid_positions",
    "load_preview_settings",
    "load_runtime_paths",
    "Rect",
    "render_ascii",
    "split_bands",
]
