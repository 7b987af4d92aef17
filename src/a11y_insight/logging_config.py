"""
Logging configuration for a11y-insight.

Reports are written to stdout, so log records only ever go to stderr
through a RichHandler, plus an optional plain-text log file. Handlers are
attached to the ``a11y_insight`` logger, never to the root logger.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "a11y_insight"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the a11y_insight logger from ``A11yConfig.verbosity``.

    Calling it again replaces the handlers of the previous call.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or "verbose" (debug)
        log_file: Optional file that receives every record, DEBUG included

    Returns:
        The configured a11y_insight logger

    Raises:
        ValueError: If verbosity is not a known level
    """
    level = LEVELS.get(verbosity)
    if level is None:
        raise ValueError(f"Unknown verbosity: {verbosity!r}. Choose from: {', '.join(LEVELS)}")
    verbose = verbosity == "verbose"

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if log_file else level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the a11y_insight namespace.

    Args:
        name: Module name (e.g., 'a11y_insight.normalization.assembler');
              prefixed with 'a11y_insight.' when it lies outside the namespace.
              None returns the package logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
