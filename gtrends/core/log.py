"""
Logging setup for applications embedding the client.

The library itself only calls logging.getLogger(__name__); it never
configures handlers on import. Applications that want the same console
format as the rest of the stack call configure_logging() once at startup.
"""

import logging

from gtrends.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(debug: bool | None = None) -> None:
    """Install a basic console handler. Defaults to settings.debug."""
    if debug is None:
        debug = settings.debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )
