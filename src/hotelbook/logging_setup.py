"""Logging configuration."""

import logging
import sys

from hotelbook.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure root logging at settings.log_level with a readable text format."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if settings.debug:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("psycopg.pool").setLevel(logging.WARNING)
