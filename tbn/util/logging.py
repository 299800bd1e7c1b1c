"""Stdlib logging setup for the route layer.

Route handlers log through ``logging``; records are printed to stdout and
forwarded to Logfire so they land in the same trace as the service spans.
"""

import logging
import sys

import logfire

from tbn.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Chatty libraries that only matter when something is wrong
QUIET_LOGGERS = ("httpx", "httpcore", "google.auth", "urllib3", "cachecontrol")


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the API process.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    logging.basicConfig(
        level=level,
        handlers=[console, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
