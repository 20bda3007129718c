"""
Logging configuration.
JSON logs in production, human-readable in development.
"""

from __future__ import annotations

import logging
import sys

from location_matcher.config import get_settings


def setup_logging() -> None:
    """Configure logging based on environment."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.env == "production":
        _setup_json_logging(level)
    else:
        _setup_basic_logging(level)


def _setup_json_logging(level: int) -> None:
    """One JSON object per line on stdout, for log aggregators."""
    import json_log_formatter

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(json_log_formatter.JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]


def _setup_basic_logging(level: int) -> None:
    """Human-readable logging for development."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
