"""
autogrid: automatic near-square grid layout.

Main entry point for the autogrid tool. Computes the cells for N items inside
an area and prints them, optionally rendering a preview image.
"""

import logging
import sys

from cli import (
    CLIError,
    load_grid_settings,
    load_preview_settings,
    parse_area,
    parse_args,
    parse_non_negative_int,
    resolve_plot_path,
    validate_output_area,
)
from grid_core.formatting import format_cells_table, format_cells_yaml, format_rect, render_ascii
from grid_core.grid import calculate_grid_shape, compute_grid
from grid_plot.visualizer import GridVisualizer
from logging_config import setup_logging, get_logger


def _configure_console_logging(args, logger) -> None:
    """Apply console verbosity rules based on CLI flags."""
    autogrid_logger = logging.getLogger("autogrid")
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        return

    for handler in autogrid_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)
    if args.verbose:
        logger.debug("Verbose mode enabled (console output at DEBUG level)")


def _resolve_run_context(args) -> dict:
    """Resolve parsed CLI options into validated run-time context values."""
    count = parse_non_negative_int(args.count, "count")
    area = parse_area(args.area)
    validate_output_area(area, args.output_format)
    spacing, remainder = load_grid_settings(args.config)
    if args.spacing is not None:
        spacing = parse_non_negative_int(args.spacing, "spacing")
    if args.remainder is not None:
        remainder = args.remainder
    return {
        'count': count,
        'area': area,
        'spacing': spacing,
        'remainder': remainder,
    }


def _render_output(output_format: str, area, cells) -> str:
    if output_format == 'yaml':
        return format_cells_yaml(cells).rstrip("\n")
    if output_format == 'ascii':
        return render_ascii(area, cells)
    return format_cells_table(cells)


def _render_preview(args, ctx, cells) -> None:
    """Render the PNG preview requested with --plot/--show."""
    settings = load_preview_settings(args.config)
    save_file = resolve_plot_path(args.plot, args.config) if args.plot else None
    rows, columns = calculate_grid_shape(ctx['count'])
    title = f"{ctx['count']} cells, {columns}x{rows} grid, spacing {ctx['spacing']}"
    try:
        visualizer = GridVisualizer(ctx['area'], cells, settings)
    except ValueError as exc:
        raise CLIError(str(exc), "Use an area with positive width and height for previews.") from exc
    visualizer.plot(title=title, save_file=str(save_file) if save_file else "", show_plot=args.show)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for autogrid.

    Parses command-line arguments, loads grid defaults from config, computes
    the layout and writes it to stdout.
    """
    try:
        args = parse_args(argv)
    except CLIError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # Initialize logging
    try:
        setup_logging(args.config)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    logger = get_logger("autogrid")  # Use explicit name, not __name__

    # Handle verbose/quiet flags for console output
    _configure_console_logging(args, logger)

    try:
        ctx = _resolve_run_context(args)
    except CLIError as e:
        logger.error(str(e))
        return 2

    area = ctx['area']
    logger.debug(
        "Computing %d cells in %s with spacing %d (remainder=%s)",
        ctx['count'], format_rect(area), ctx['spacing'], ctx['remainder'],
    )
    cells = compute_grid(area, ctx['count'], ctx['spacing'], ctx['remainder'])

    output = _render_output(args.output_format, area, cells)
    if output:
        print(output)

    if args.plot or args.show:
        try:
            _render_preview(args, ctx, cells)
        except CLIError as e:
            logger.error(str(e))
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
