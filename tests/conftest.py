from __future__ import annotations

import logging

import pytest
import structlog

from rulechain import TypeRegistry, default_registry
from rulechain.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; drop the cache so env changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def library_logging():
    """configure_logging() mutates global state; put it back after each test."""
    logger = logging.getLogger("rulechain")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers, logger.propagate = handlers, propagate
    logger.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def registry() -> TypeRegistry:
    return default_registry()


@pytest.fixture
def verify_behavior():
    """Check a schema against (value, expected validity) pairs."""

    def _verify(schema, cases):
        for value, expected in cases:
            result = schema.validate(value)
            assert result.is_valid is expected, (
                f"{value!r}: expected {'valid' if expected else 'invalid'}, got {result.kind}"
            )

    return _verify

