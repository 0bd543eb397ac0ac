"""Shared fixtures for adaptivemap tests."""

import logging

import pytest

from helpers import CollidingKey


@pytest.fixture
def colliding_keys():
    """Factory for n keys that all land in the same bucket."""
    def make(n, slot=0):
        return [CollidingKey(i, slot) for i in range(n)]
    return make


@pytest.fixture
def restore_adaptivemap_logger():
    """Undo logging.config changes made to the adaptivemap logger."""
    logger = logging.getLogger('adaptivemap')
    saved = (logger.level, list(logger.handlers), logger.propagate, logger.disabled)
    yield logger
    level, handlers, logger.propagate, logger.disabled = saved
    logger.setLevel(level)
    logger.handlers[:] = handlers
