"""
Logging helpers shared by the engine, the runner and the CLI.

A single named logger is configured here so every module writes through
the same handler. Inference code does not log; model loading and the
command-line runner do.
"""

import logging

LOGGER_NAME = "style_transfer_lite"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the named logger, attaching a handler on first use.

    Repeated calls with the same name reuse the existing handler rather
    than stacking new ones, so importing modules may call this freely.

    Args:
        name: Logger name.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter.
        handler: Optional custom handler, a stderr stream by default.

    Returns:
        The configured logger.

    """
    named_logger = logging.getLogger(name)
    named_logger.setLevel(level)
    if not named_logger.handlers:
        if handler is None:
            handler = logging.StreamHandler()
        handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
        named_logger.addHandler(handler)
        named_logger.propagate = False
    return named_logger


def set_verbosity(*, verbose: bool) -> None:
    """Switch the shared logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger = setup_logger()
