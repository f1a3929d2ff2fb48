"""Structlog configuration and logger setup.

scopetext is embedded by a host application, which owns logging
configuration. Importing the package configures nothing; module loggers are
lazy and pick up whatever structlog configuration is active when an event
is emitted.

Usage:
    from scopetext.logging import configure_logging, get_module_logger

    # Optional, for hosts without their own structlog setup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from scopetext.configuration import get_settings


def _processors(prod_mode: bool) -> List[Any]:
    processors: List[Any] = [
        # Render correlation ids and other bound context
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for hosts that opt in.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    settings = get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production
    effective_log_level = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level, logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a lazy logger for the calling module with full path context.

    Binds ``component`` (last dotted segment) and ``module_path``. The
    logger is only assembled on first use, so configuration applied by the
    host after import still takes effect.

    Example:
        # In scopetext/i18n/resolver.py
        logger = get_module_logger()
        # context: {"component": "resolver", "module_path": "scopetext.i18n.resolver"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    return structlog.stdlib.get_logger(
        component=module.__name__.split(".")[-1],
        module_path=module.__name__,
    )
