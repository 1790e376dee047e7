"""Logging configuration for wordstem using loguru."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure loguru logger based on verbose and debug flags.

    Stems are printed to stdout, log records go to stderr and stay at
    WARNING unless asked for, so piped output holds only stems.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )
    else:
        level = "INFO" if verbose else "WARNING"
        format_str = "<level>{message}</level>"

    logger.add(sys.stderr, format=format_str, level=level, colorize=True)
