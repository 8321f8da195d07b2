"""Centralized logging configuration for date-range-checker.

Human-readable console logging on stderr by default, structured JSON
logging for machine consumption, and an optional rotating JSON log file.
"""

import copy
import logging
import logging.config
import os
from typing import Any


# Default logging configuration
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "date_range_checker": {
            "level": "DEBUG",
            "handlers": ["console"],
            "propagate": False,
        },
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"],
    },
}


def build_logging_config(
    json_output: bool = False,
    log_level: str | None = "WARNING",
    log_file: str | None = None,
) -> dict[str, Any]:
    """Return a dictConfig mapping for the given options.

    Args:
        json_output: If True, use JSON formatter for console output
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating JSON log file (DEBUG level)
    """
    config = copy.deepcopy(LOGGING_CONFIG)

    # Override console formatter if JSON output requested
    if json_output:
        config["handlers"]["console"]["formatter"] = "json"

    if log_level:
        config["handlers"]["console"]["level"] = log_level.upper()

    if log_file:
        config["handlers"]["json_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
        config["loggers"]["date_range_checker"]["handlers"].append("json_file")

    return config


def setup_logging(
    json_output: bool = False,
    log_level: str | None = "WARNING",
    log_file: str | None = None,
) -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, use JSON formatter for console output
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating JSON log file
    """
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    logging.config.dictConfig(
        build_logging_config(json_output=json_output, log_level=log_level, log_file=log_file)
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Scanned directory", extra={"directory": "/data", "matched": 12})
    """
    return logging.getLogger(name)
