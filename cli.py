"""
CLI and configuration utilities for autogrid.

Handles command-line argument parsing and config-backed defaults.
"""

from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path

import yaml

from grid_core.config import CoreConfigService
from grid_core.constants import MAX_ASCII_AREA, VALID_OUTPUT_FORMATS, VALID_REMAINDER_POLICIES
from grid_core.rect import Rect

logger = logging.getLogger("autogrid")

__version__ = "1.0.0"
DEFAULT_AREA = "80x24"
DEFAULT_OUTPUT_FORMAT = VALID_OUTPUT_FORMATS[0]
_AREA_PATTERN = re.compile(r"^(\d+)x(\d+)(?:([+-]\d+)([+-]\d+))?$")


class CLIError(ValueError):
    """User-facing CLI validation error with optional hint text."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class FriendlyArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises CLIError instead of exiting immediately."""

    def error(self, message: str) -> None:
        hint = None
        if "required: count" in message:
            hint = "Pass the number of cells to arrange, e.g. '%s 6'." % self.prog
        elif "unrecognized arguments" in message and "--gap" in message:
            hint = "Use --spacing N to set the gap between cells."
        usage = self.format_usage().strip()
        raise CLIError(f"Argument error: {message}\n{usage}", hint=hint)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for autogrid.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    parser = FriendlyArgumentParser(
        prog="autogrid",
        description="Arrange N cells in an automatic near-square grid.",
        epilog="""
Examples:
  %(prog)s 6                                # 6 cells in the default 80x24 area
  %(prog)s 9 --area 100x100 --spacing 1     # 3x3 grid with 1-unit gaps
  %(prog)s 5 --area 90x60+10+5 --format ascii
  %(prog)s 12 --area 120x40 --plot grid.png # Save a PNG preview
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("count", type=str, help="Number of cells to arrange (non-negative integer)")

    layout_group = parser.add_argument_group("layout")
    layout_group.add_argument(
        "-a", "--area",
        type=str,
        default=DEFAULT_AREA,
        help=f"Outer area as WxH or WxH+X+Y (default: {DEFAULT_AREA})"
    )
    layout_group.add_argument(
        "-s", "--spacing",
        type=str,
        default=None,
        help="Gap between adjacent cells (default: grid.spacing from config)"
    )
    layout_group.add_argument(
        "-r", "--remainder",
        choices=VALID_REMAINDER_POLICIES,
        default=None,
        help="Where leftover units go: 'last' band or spread 'even'ly (default: grid.remainder from config)"
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "-f", "--format",
        dest="output_format",
        choices=VALID_OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT})"
    )
    output_group.add_argument(
        "--plot",
        type=Path,
        default=None,
        metavar="FILE",
        help="Save a PNG preview of the grid (relative paths go under runtime_paths.out_dir)"
    )
    output_group.add_argument(
        "--show",
        action="store_true",
        help="Show the preview interactively"
    )
    output_group.add_argument(
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config YAML file (default: config.yaml)"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress console log output except errors (log file unaffected)"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose console output (DEBUG level, log file always at DEBUG)"
    )

    return parser.parse_args(argv)


def parse_non_negative_int(value: str | int, name: str) -> int:
    """
    Parse a CLI value into a non-negative integer.

    Raises:
        CLIError: If the value is not an integer >= 0.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise CLIError(
            f"Invalid {name} '{value}'.",
            f"{name} must be a non-negative integer."
        )
    if number < 0:
        raise CLIError(
            f"Invalid {name} '{value}'.",
            f"{name} must be a non-negative integer."
        )
    return number


def parse_area(area_str: str) -> Rect:
    """
    Parse an area string into a Rect.

    Args:
        area_str: "WxH" (origin 0,0) or "WxH+X+Y" (signed offsets, e.g. "80x24+2-1").

    Returns:
        Rect: The parsed area.

    Raises:
        CLIError: If the area format is invalid.
    """
    match = _AREA_PATTERN.match((area_str or "").strip().lower())
    if not match:
        raise CLIError(
            f"Invalid area format '{area_str}'.",
            "Use WxH or WxH+X+Y with non-negative sizes (e.g., --area 80x24 or --area 80x24+2+1)."
        )
    width, height, x, y = match.groups()
    return Rect(int(x or 0), int(y or 0), int(width), int(height))


def validate_output_area(area: Rect, output_format: str) -> None:
    """Reject areas the chosen output format cannot render."""
    if output_format == 'ascii' and area.area > MAX_ASCII_AREA:
        raise CLIError(
            f"Area {area.width}x{area.height} is too large for ascii output.",
            f"Ascii maps are limited to {MAX_ASCII_AREA} units; use --format table or yaml."
        )


def load_grid_settings(config_file: Path) -> tuple[int, str]:
    """
    Load default spacing and remainder policy from config YAML file.

    Args:
        config_file: Path to config YAML file.

    Returns:
        tuple[int, str]: (spacing, remainder) from config, or defaults (1, 'last').
    """
    try:
        return CoreConfigService(config_file).load_grid_settings()
    except (ValueError, OSError, yaml.YAMLError) as exc:
        raise CLIError(str(exc)) from exc


def load_preview_settings(config_file: Path) -> dict:
    try:
        return CoreConfigService(config_file).load_preview_settings()
    except (ValueError, OSError, yaml.YAMLError) as exc:
        raise CLIError(str(exc)) from exc


def resolve_plot_path(plot_file: Path, config_file: Path) -> Path:
    """Place relative plot paths under runtime_paths.out_dir and ensure the directory exists."""
    if not plot_file.is_absolute():
        try:
            out_dir = CoreConfigService(config_file).load_runtime_paths()['out_dir']
        except (ValueError, OSError, yaml.YAMLError) as exc:
            raise CLIError(str(exc)) from exc
        plot_file = Path(out_dir) / plot_file
    logger.debug("Preview path resolved to %s", plot_file)
    plot_file.parent.mkdir(parents=True, exist_ok=True)
    return plot_file
