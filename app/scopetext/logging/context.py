"""Render context binding for structured logging.

Usage:
    from scopetext.logging import bind_render_context

    with bind_render_context(ambient_language="en"):
        # All logs within this block carry render_id and ambient_language
        logger.info("rendering_tree")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_render_context(
    render_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind render-scoped context to all logs within the block.

    Args:
        render_id: Identifier of the render pass. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The render id in effect.
    """
    context: dict[str, Any] = {"render_id": render_id or str(uuid.uuid4())}
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["render_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_render_id() -> Optional[str]:
    """Get the current render id from the logging context, if any."""
    return structlog.contextvars.get_contextvars().get("render_id")
