"""Pytest configuration and shared fixtures for variantkit tests."""

import logging

import pytest
import structlog

from variantkit._config import reset
from variantkit._logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from environment-detected settings and default logging."""
    monkeypatch.delenv('VARIANTKIT_ASSERTIONS', raising=False)
    monkeypatch.delenv('VARIANTKIT_LOG_LEVEL', raising=False)
    library_logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = library_logger.handlers[:], library_logger.level, library_logger.propagate
    reset()
    yield
    reset()
    structlog.reset_defaults()
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from variantkit import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value with a list payload."""
    from variantkit import Failure

    return Failure(['test error'])


@pytest.fixture
def shape():
    """A fresh two-variant union with no methods installed."""
    from variantkit import union

    return union(
        'tests:Shape',
        {
            'Circle': lambda radius: {'radius': radius},
            'Rect': lambda width, height: {'width': width, 'height': height},
        },
    )
