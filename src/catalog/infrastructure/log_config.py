"""Logging setup for the command-line entry point.

Library code only ever calls ``logging.getLogger(__name__)``; handlers and
formatters are attached here, once, by the CLI.
"""

from __future__ import annotations

import logging.config

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_logging_config(level: str = "WARNING") -> dict:
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{asctime} {levelname} {name}: {message}",
                "style": "{",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "verbose" if level == "DEBUG" else "simple",
            },
        },
        "loggers": {
            "catalog": {
                "handlers": ["stderr"],
                "level": level,
                "propagate": False,
            },
        },
    }


def configure_logging(level: str = "WARNING") -> None:
    logging.config.dictConfig(get_logging_config(level))
