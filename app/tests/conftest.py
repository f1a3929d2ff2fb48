"""Shared fixtures for scopetext tests."""

import logging

import pytest
import structlog

from scopetext.configuration import get_settings


@pytest.fixture(scope="session", autouse=True)
def silence_logging():
    """Suppress log output for the whole test session.

    scopetext never configures logging on import, so the suite installs a
    quiet stdlib-backed configuration itself and restores the defaults after.
    """
    previous_level = logging.root.level
    logging.root.setLevel(logging.CRITICAL + 1)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()
    logging.root.setLevel(previous_level)


@pytest.fixture(autouse=True)
def clear_logging_context():
    """Prevent bound logging context from leaking between tests."""
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def fresh_settings():
    """Clear the settings singleton before and after the test."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
