import random

from loguru import logger
import pytest


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def log_messages():
    """Capture loguru output as a list of formatted messages."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="TRACE"
    )
    yield messages
    logger.remove(handler_id)
