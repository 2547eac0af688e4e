"""
Global pytest fixtures for whisker tests.

This module provides:
- The whisker module as a fixture
- Per-test reset of the template config singleton
- Per-test restore of the whisker logger state
"""

import logging

import pytest


@pytest.fixture
def whisker():
    """Import and return the whisker module."""
    import whisker

    return whisker


@pytest.fixture(autouse=True)
def reset_template_config():
    """Restore template config defaults after every test."""
    from whisker.template import config

    yield config
    config.reset()


@pytest.fixture(autouse=True)
def restore_logger():
    """Restore whisker logger handlers and level after every test."""
    logger = logging.getLogger("whisker")
    handlers = logger.handlers[:]
    level = logger.level

    yield logger

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
