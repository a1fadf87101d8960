"""Configuration helpers shared across CLI and plotting layers."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from matplotlib import colormaps as mpl_colormaps

from .constants import (
    DEFAULT_GRID_SETTINGS,
    DEFAULT_PREVIEW_SETTINGS,
    DEFAULT_RUNTIME_PATHS,
    VALID_REMAINDER_POLICIES,
)

logger = logging.getLogger("autogrid")


def read_config(config_file: Path) -> dict:
    """Read a YAML config file; a missing file behaves like an empty one.

    Raises:
        ValueError: If the file cannot be read, is not valid YAML, or is not a mapping.
    """
    config_file = Path(config_file)
    if not config_file.exists():
        logger.debug("Config file %s not found; using defaults", config_file)
        return {}

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {config_file}: {exc}") from exc
    except OSError as exc:
        raise ValueError(f"Cannot read config file {config_file}: {exc}") from exc

    if not isinstance(config, dict):
        raise ValueError(f"Invalid config in {config_file}; expected mapping at top level.")
    return config


def read_section(config_file: Path, section: str) -> dict:
    """Return one top-level mapping section of the config; absent sections are empty."""
    section_config = read_config(config_file).get(section, {})
    if section_config is None:
        return {}
    if not isinstance(section_config, dict):
        raise ValueError(f"Invalid {section} section in {config_file}; expected mapping.")
    return section_config


class CoreConfigService:
    """Stateful access wrapper for core config helpers."""

    def __init__(self, config_file: Path = Path("config.yaml")) -> None:
        self.config_file = config_file

    def load_grid_settings(self) -> tuple[int, str]:
        grid_config = read_section(self.config_file, 'grid')

        spacing = grid_config.get('spacing', DEFAULT_GRID_SETTINGS['spacing'])
        remainder = grid_config.get('remainder', DEFAULT_GRID_SETTINGS['remainder'])

        if not isinstance(spacing, int) or isinstance(spacing, bool) or spacing < 0:
            raise ValueError("grid.spacing must be a non-negative integer")
        if remainder not in VALID_REMAINDER_POLICIES:
            allowed = ', '.join(VALID_REMAINDER_POLICIES)
            raise ValueError(
                f"Invalid grid.remainder '{remainder}' in {self.config_file}. Use one of: {allowed}."
            )

        return (spacing, remainder)

    def load_preview_settings(self) -> dict:
        return load_preview_settings(self.config_file)

    def load_runtime_paths(self) -> dict[str, str]:
        return load_runtime_paths(self.config_file)


def load_preview_settings(config_file: Path = Path("config.yaml")) -> dict:
    """Load and validate preview rendering settings from config YAML.

    Settings are read from the top-level ``preview`` section and merged with
    defaults when keys are missing.
    """
    settings = DEFAULT_PREVIEW_SETTINGS.copy()
    settings.update(read_section(config_file, 'preview'))

    colormap = settings['colormap']
    if not isinstance(colormap, str) or not colormap.strip():
        raise ValueError("preview.colormap must be a non-empty string")
    colormap = colormap.strip()
    if colormap not in mpl_colormaps:
        raise ValueError(f"Unknown preview.colormap '{colormap}'")
    settings['colormap'] = colormap

    dpi = settings['dpi']
    if not isinstance(dpi, int) or isinstance(dpi, bool) or dpi <= 0:
        raise ValueError("preview.dpi must be a positive integer")

    try:
        settings['scale'] = float(settings['scale'])
    except (TypeError, ValueError):
        raise ValueError("preview.scale must be a number")
    if settings['scale'] <= 0:
        raise ValueError("preview.scale must be > 0")

    if not isinstance(settings['show_labels'], bool):
        raise ValueError("preview.show_labels must be boolean")
    if not isinstance(settings['area_colour'], str) or not settings['area_colour'].strip():
        raise ValueError("preview.area_colour must be a non-empty string")

    return settings


def load_runtime_paths(config_file: Path = Path("config.yaml")) -> dict[str, str]:
    """Load runtime path defaults from config YAML.

    Paths are read from top-level ``runtime_paths`` and merged with minimal
    defaults when keys are missing.
    """
    paths = DEFAULT_RUNTIME_PATHS.copy()
    runtime_paths = read_section(config_file, 'runtime_paths')

    for key in DEFAULT_RUNTIME_PATHS:
        if key in runtime_paths:
            value = runtime_paths[key]
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"runtime_paths.{key} must be a non-empty string")
            paths[key] = value.strip()

    return paths
