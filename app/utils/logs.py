"""Logging setup."""

import logging

from config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def configure_logging() -> None:
    """Configure root logging from settings.

    Safe to call more than once; basicConfig is a no-op when the root logger
    already has handlers, which is also the case inside a managed runtime that
    installs its own.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
    logging.getLogger("app").setLevel(settings.log_level.upper())
