"""Logging configuration for the command-line entry point.

Library code only creates module loggers; handlers are attached here,
once, when the CLI starts.
"""

from __future__ import annotations

import logging
import logging.config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": LOG_FORMAT,
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "catalog": {
            "handlers": ["console"],
            "level": logging.WARNING,
            "propagate": False,
        },
    },
}


def configure_logging(verbose: bool = False) -> None:
    """Apply LOGGING_CONFIG; ``verbose`` lowers the catalog level to DEBUG."""
    logging.config.dictConfig(LOGGING_CONFIG)
    if verbose:
        logging.getLogger("catalog").setLevel(logging.DEBUG)
