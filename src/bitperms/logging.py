"""Structured logging setup."""

import logging

import structlog

from bitperms.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the package.

    Args:
        settings: Settings to read the level and renderer from; the cached
            settings are used when omitted
    """
    settings = settings or get_settings()
    level = logging.getLevelNamesMapping().get(settings.log_level, logging.INFO)

    # The store logs through stdlib logging; give it somewhere to go
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("bitperms").setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.processors.JSONRenderer()
                if settings.log_json
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
