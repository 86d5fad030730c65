"""Shared test fixtures and configuration.

Sets up fake environment variables so load_settings() doesn't sys.exit(),
and provides a mocked notifier so no test reaches the Telegram API.
"""

import os

# Patch env vars BEFORE any notify_mcp imports
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "fake-token-for-tests")
os.environ.setdefault("TELEGRAM_CHAT_ID", "12345")

import pytest
from unittest.mock import AsyncMock


@pytest.fixture
def notifier():
    """Return a NotificationPort double whose send_message yields message_id 42."""
    mock = AsyncMock()
    mock.send_message = AsyncMock(return_value=42)
    return mock
