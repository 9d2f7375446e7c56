"""structlog setup shared by every module.

Nothing is configured on import; applications call :func:`setup_logging`
once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from nxvsh.config import Settings, settings


def setup_logging(cfg: Settings | None = None) -> None:
    """Configure structlog level filtering and rendering on stderr."""
    _cfg = cfg or settings
    level = logging.getLevelName(_cfg.nxvsh_log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if _cfg.nxvsh_log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    return structlog.get_logger(name)
