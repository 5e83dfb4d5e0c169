"""
Structured logging configuration using structlog.

One logging setup for the whole library: coloured console output while
developing, JSON lines in production.

Usage:
    from core.logging import configure_logging, get_logger

    # Configure once at startup
    configure_logging(json_logs=False)                 # Development
    configure_from_settings(get_settings())            # From env / .env

    logger = get_logger(__name__)
    logger.info("Scored hotel", hotel_id="h-1", total_score=42)
    logger.warning("Corrupt passion selection", storage_key="hotelFinder_passions")
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        json_logs: JSON renderer when True, coloured console renderer otherwise.
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        include_timestamp: Prefix every event with an ISO timestamp.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, log_level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    # basicConfig is a no-op once handlers exist, so set the level explicitly
    logging.getLogger().setLevel(level)

    # The redis client is chatty at DEBUG
    logging.getLogger("redis").setLevel(logging.WARNING)


def configure_from_settings(settings: Any) -> None:
    """Configure logging from a ``config.Settings`` instance."""
    configure_logging(
        json_logs=settings.json_logs or settings.is_production,
        log_level="DEBUG" if settings.debug else settings.log_level,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """
    Bind key/values to every subsequent log line in the current context.

    Handy for scoping a block of work to one traveller:

        bind_context(user_id="u-42")
        profile.toggle_passion("gourmet-foodie")   # logs carry user_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


class LoggerMixin:
    """
    Gives a class a ``logger`` property named after the class.

    Usage:
        class PassionProfile(LoggerMixin):
            def load(self):
                self.logger.debug("Loading selection")
    """

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)
