"""
structlog configuration for gqlfreeze.

Library modules wrap a stdlib ``logging.getLogger(__name__)`` in a structlog BoundLogger, so
an unconfigured host gets stdlib defaults (debug and info dropped). Applications that want
to see the events call configure_logging once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

from gqlfreeze.config import CodecSettings

__all__ = [
    "configure_logging",
]


def configure_logging(settings: CodecSettings | None = None, stream: IO[str] | None = None) -> None:
    """
    Configure stdlib logging and structlog processors.

    Args:
        settings (CodecSettings | None): Source of log_level and log_json; loaded with
            CodecSettings.load() when None.
        stream (IO[str] | None): Output stream, stdout by default.
    """
    settings = settings or CodecSettings.load()
    level = getattr(logging, settings.log_level, logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
