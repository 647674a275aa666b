"""Stellara Events -- Logging setup.

Library modules only ever call ``logging.getLogger(__name__)``; the
embedding application calls ``setup_logging`` once at start-up.
"""

import json
import logging
import logging.config


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Setup structured JSON logging.

    Two modes are supported:
    - ``json``  -- machine-parseable JSON-ish format (default)
    - ``text``  -- human-readable format for local development

    Args:
        log_level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: ``"json"`` or ``"text"``.
    """
    if log_format == "json":
        formatter = {
            "class": "logging.Formatter",
            "format": json.dumps({
                "time": "%(asctime)s",
                "level": "%(levelname)s",
                "module": "%(name)s",
                "message": "%(message)s",
            }),
        }
    else:
        formatter = {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        }
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
    }
    logging.config.dictConfig(config)


def setup_logging_from_settings() -> None:
    """Configure logging from ``StellaraSettings``."""
    from stellara_events.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
