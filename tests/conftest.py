from typing import List

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Fixture collecting urlivo log records as ``"LEVEL message"`` strings."""
    messages: List[str] = []

    def _sink(message):
        record = message.record
        messages.append(f"{record['level'].name} {record['message']}")

    logger.enable("urlivo")
    handler_id = logger.add(_sink, level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable("urlivo")
