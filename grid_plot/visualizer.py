import logging

import matplotlib.pyplot as plt
from matplotlib import colormaps as mpl_colormaps
from matplotlib.patches import Rectangle

from grid_core.constants import DEFAULT_PREVIEW_SETTINGS
from grid_core.formatting import cell_label
from grid_core.rect import Rect

logger = logging.getLogger("autogrid")


class GridVisualizer:
    """
    Visualizer for previewing an auto-grid layout.
    Draws the outer area and every cell as a filled rectangle, with grid units
    mapped to inches by the configured scale.
    """

    MIN_FIG_SIZE_IN = 2.0
    MAX_FIG_SIZE_IN = 40.0

    def __init__(self, area: Rect, cells: list[Rect], settings: dict | None = None) -> None:
        """
        Initialize the visualizer with the layout to draw.

        Args:
            area: Outer rectangle the cells were computed for.
            cells: Cells in row-major order.
            settings: Preview settings (see ``load_preview_settings``); defaults when omitted.
        Raises:
            ValueError: If the area has no drawable extent.
        """
        if area.is_empty:
            raise ValueError(f"Cannot preview empty area {area.width}x{area.height}.")

        self.area = area
        self.cells = list(cells)
        self.settings = DEFAULT_PREVIEW_SETTINGS.copy()
        if settings:
            self.settings.update(settings)

    def figure_size(self) -> tuple[float, float]:
        """Figure size in inches, clamped so tiny or huge areas stay viewable."""
        scale = self.settings['scale']

        def clamp(value: float) -> float:
            return min(max(value, self.MIN_FIG_SIZE_IN), self.MAX_FIG_SIZE_IN)

        return (clamp(self.area.width * scale), clamp(self.area.height * scale))

    def cell_colours(self) -> list:
        cmap = mpl_colormaps[self.settings['colormap']]
        # Qualitative maps (tab10, tab20, ...) have few entries: cycle through them
        if cmap.N < 256:
            return [cmap(i % cmap.N) for i in range(len(self.cells))]
        n = max(len(self.cells), 1)
        return [cmap(i / n) for i in range(len(self.cells))]

    def draw(self, ax: plt.Axes) -> int:
        """
        Draw area and cells onto ``ax``.

        Returns:
            Number of cells drawn (empty cells are skipped).
        """
        area = self.area
        ax.add_patch(Rectangle(
            (area.x, area.y), area.width, area.height,
            facecolor=self.settings['area_colour'], edgecolor='black', linewidth=1.0,
        ))

        drawn = 0
        for index, (cell, colour) in enumerate(zip(self.cells, self.cell_colours())):
            if cell.is_empty:
                logger.debug("Skipping empty cell %d (%dx%d)", index, cell.width, cell.height)
                continue
            ax.add_patch(Rectangle(
                (cell.x, cell.y), cell.width, cell.height,
                facecolor=colour, edgecolor='black', linewidth=0.5,
            ))
            if self.settings['show_labels']:
                ax.text(
                    cell.x + cell.width / 2,
                    cell.y + cell.height / 2,
                    cell_label(index),
                    ha='center',
                    va='center',
                )
            drawn += 1

        ax.set_xlim(area.left, area.right)
        # Origin is top-left, as on a terminal
        ax.set_ylim(area.bottom, area.top)
        ax.set_aspect('equal')
        return drawn

    def plot(self, title: str = "", save_file: str = "", show_plot: bool = False) -> None:
        """
        Plot the layout preview and optionally save it to file.

        Args:
            title: Plot title.
            save_file: Output file path; nothing is written when empty.
            show_plot: Whether to display the plot on screen (default False).
        """
        fig, ax = plt.subplots(figsize=self.figure_size())
        drawn = self.draw(ax)
        logger.debug("Drew %d of %d cells", drawn, len(self.cells))

        if title:
            ax.set_title(title)

        if show_plot:
            plt.show()
        if save_file:
            fig.savefig(save_file, dpi=self.settings['dpi'], bbox_inches="tight")
            logger.info("Saved preview to %s", save_file)
        plt.close(fig)
