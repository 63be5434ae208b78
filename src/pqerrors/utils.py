"""
Utility functions for pqerrors.

Includes message normalization and logging setup.
"""

import sys

from loguru import logger


def chomp(text: str) -> str:
    """Strip trailing newlines (PostgreSQL messages are newline-terminated)."""
    return text.rstrip("\r\n")


def configure_logging(level: str = "WARNING") -> None:
    """Send pqerrors log records to stderr at the given level.

    Meant for the CLI: ``logger.remove()`` drops every loguru sink in the
    process, including ones the host application added.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    logger.enable("pqerrors")
