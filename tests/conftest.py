"""Pytest configuration and fixtures."""

import logging

import pytest

from plainassert import expected


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up plainassert loggers after each test to prevent handler leakage."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("plainassert"):
            continue
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_default_register():
    """Put the default expected-exception register back to process scope, unset."""
    yield

    expected.set_expected(None)
    expected.use_scope("process")
    expected.set_expected(None)
