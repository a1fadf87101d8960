"""Core constants shared across configuration helpers."""

VALID_REMAINDER_POLICIES = ("last", "even")
DEFAULT_REMAINDER_POLICY = VALID_REMAINDER_POLICIES[0]
DEFAULT_GRID_SETTINGS = {
    'spacing': 1,
    'remainder': DEFAULT_REMAINDER_POLICY,
}
DEFAULT_COLORMAP = "tab20"
DEFAULT_PREVIEW_SETTINGS = {
    'colormap': DEFAULT_COLORMAP,
    'dpi': 100,
    'scale': 0.1,
    'show_labels': True,
    'area_colour': '#dddddd',
}
DEFAULT_RUNTIME_PATHS = {
    'out_dir': 'output',
}
VALID_OUTPUT_FORMATS = ("table", "yaml", "ascii")
DEFAULT_LOGGING_SETTINGS = {
    'log_file': 'autogrid.log',
    'console_level': 'WARNING',
    'file_mode': 'w',
    'matplotlib_level': 'WARNING',
}
# Largest area (width x height) the ascii renderer will draw
MAX_ASCII_AREA = 250_000
