"""Logging setup for release-actions."""

import logging
import sys

from ..constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send log records to stderr; stdout carries the workflow commands."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
