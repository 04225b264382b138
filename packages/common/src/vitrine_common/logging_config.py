"""Structured logging setup.

All packages log through structlog with snake_case event names and keyword
context, e.g. ``logger.info("external_manifest_loaded", url=url, users=3)``.
Output goes to stderr so it never mixes with CLI output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from vitrine_common.config import get_settings


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure structlog and stdlib logging.

    Args:
        level: Log level name. Defaults to ``Settings.log_level``
        log_format: ``console`` or ``json``. Defaults to ``Settings.log_format``
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    fmt = (log_format or settings.log_format).lower()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger bound to ``name``."""
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()
