"""Preview plotting package for autogrid."""

from .visualizer import GridVisualizer

__all__ = ["GridVisualizer"]
