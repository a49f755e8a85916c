"""
Pytest configuration and fixtures
"""
import numpy as np
import pytest
from loguru import logger


@pytest.fixture
def rng() -> np.random.Generator:
    """A seeded generator so that every random test replays the same draws"""
    return np.random.default_rng(12345)


@pytest.fixture
def log_messages():
    """Collects loguru messages of level DEBUG and above"""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
