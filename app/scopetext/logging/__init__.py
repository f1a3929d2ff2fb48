"""Structured logging built on structlog.

Public API:
    - configure_logging(): Opt-in logging configuration for hosts
    - get_module_logger(): Get a logger for the calling module
    - bind_render_context(): Context manager for render-scoped logging
    - get_render_id(): Current render id, if any
"""

from scopetext.logging.context import bind_render_context, get_render_id
from scopetext.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_render_context",
    "get_render_id",
]
