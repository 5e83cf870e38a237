"""
structlog setup for the WatchLock core.

Every module logs through the ``logger`` exported here. Events are JSON
lines on stdout, tagged with the service and environment. The codecs
never log on the hot path; rejections and ratchet refusals do.
"""

from __future__ import annotations

import logging

import structlog

from .config import Settings, settings


def _normalize_log_level(level: str | None, environment: str) -> int:
    """LOG_LEVEL wins; otherwise production logs at INFO and everything else at DEBUG."""
    if level:
        normalized = level.strip().upper()
    else:
        normalized = "INFO" if environment.lower() == "production" else "DEBUG"
    return logging.getLevelNamesMapping().get(normalized, logging.INFO)


def configure_logging(config: Settings) -> int:
    """Install the JSON processor chain and return the resolved level.

    Filtering happens in the bound logger itself, so no stdlib handler is
    configured.
    """
    level = _normalize_log_level(config.log_level, config.environment)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.EventRenamer("message"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
    return level


configure_logging(settings)

logger = structlog.get_logger("watchlock").bind(
    service="watchlock",
    environment=settings.environment,
)
