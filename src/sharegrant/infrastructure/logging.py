"""Structured logging setup.

Every log line is a structlog event. Interactive terminals get a readable
console renderer; containers and anything piped get one JSON object per line.
"""

import logging
import os
import sys

import structlog


def _wants_color() -> bool:
    # FORCE_COLOR lets docker compose logs keep colors without a TTY.
    forced = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    return forced or sys.stdout.isatty()


def _renderers(color: bool) -> list[structlog.types.Processor]:
    if color:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def configure_logging(log_level: str = "INFO") -> None:
    """Install the process-wide structlog configuration.

    Events below log_level are dropped; an unknown level name means INFO.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        *_renderers(_wants_color()),
    ]
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
