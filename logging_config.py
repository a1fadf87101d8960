"""Centralized logging configuration for autogrid.

Settings come from the ``logging`` section of config.yaml, read through the
same loader as the grid and preview settings.
"""

import logging
import sys
from pathlib import Path

from grid_core.config import read_section
from grid_core.constants import DEFAULT_LOGGING_SETTINGS

LOGGER_NAME = "autogrid"
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _level_name(value, key: str) -> str:
    name = str(value).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Invalid logging.{key} '{value}'")
    return name


def load_logging_settings(config_path: Path = Path("config.yaml")) -> dict:
    """Load and validate the logging section, merged over defaults.

    Raises:
        ValueError: On unreadable/invalid YAML or invalid values.
    """
    settings = DEFAULT_LOGGING_SETTINGS.copy()
    settings.update(read_section(config_path, 'logging'))

    settings['console_level'] = _level_name(settings['console_level'], 'console_level')
    settings['matplotlib_level'] = _level_name(settings['matplotlib_level'], 'matplotlib_level')

    if settings['file_mode'] not in ('w', 'a'):
        raise ValueError("logging.file_mode must be 'w' or 'a'")
    if not isinstance(settings['log_file'], str) or not settings['log_file'].strip():
        raise ValueError("logging.log_file must be a non-empty string")

    return settings


def setup_logging(config_path: Path = Path("config.yaml")) -> logging.Logger:
    """
    Configure the autogrid logger from config.yaml.

    The log file always records DEBUG; the console shows ``console_level`` and
    above. Calling again once handlers exist returns the logger unchanged.

    Args:
        config_path: Path to the configuration YAML file.

    Returns:
        Configured logger instance.
    """
    settings = load_logging_settings(config_path)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    file_handler = logging.FileHandler(settings['log_file'], mode=settings['file_mode'], encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings['console_level'])
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    # Font discovery and backend selection are logged by matplotlib at INFO/DEBUG
    logging.getLogger("matplotlib").setLevel(settings['matplotlib_level'])

    logger.debug("Logging configured from %s (console=%s)", config_path, settings['console_level'])
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger instance (default: the autogrid logger)."""
    return logging.getLogger(name)
