"""Logging setup for applications embedding methodscope.

The library only creates module loggers; it never configures handlers on
import. Call configure_logging() from an application entry point.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the methodscope format."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
