"""Process-wide logging setup.

Application code logs through logfire; this configures the standard
library handlers that uvicorn and third-party libraries write to.
"""

import logging
import sys

from icebreaker.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that are too chatty at INFO
QUIET_LOGGERS = ("uvicorn.access",)


def log_level(settings: Settings) -> int:
    return logging.DEBUG if settings.debug else logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send log records to stdout at a level chosen by `settings.debug`.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("icebreaker").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s, storage=%s",
        settings.environment,
        logging.getLevelName(level),
        settings.storage.path,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger under the `icebreaker` hierarchy when `name` is a module path."""
    return logging.getLogger(name)
