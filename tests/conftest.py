# -*- coding: utf-8 -*-
# ============================================================================ #
# Saweria Discord Relay (SDR) - Pytest Configuration & Fixtures                #
# Copyright (c) 2025 SDR contributors                                          #
# Licensed under the MIT License                                               #
# ============================================================================ #
"""
Global pytest configuration and fixtures for all test suites.
"""

import os
import sys
import pytest
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock, AsyncMock
from typing import Dict

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Test environment setup
os.environ["TESTING"] = "true"

WATCHED_CHANNEL_ID = 987654321
BOT_USER_ID = 111222333
WEBHOOK_ID = 444555666
MESSAGE_CREATED_AT = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_env() -> Dict[str, str]:
    """Minimal environment for a valid relay configuration."""
    return {
        "DISCORD_BOT_TOKEN": "test-token-abcd",
        "DISCORD_CHANNEL_ID": str(WATCHED_CHANNEL_ID),
        "VERCEL_API_URL": "https://example.test/api/webhook",
    }


@pytest.fixture
def make_embed():
    """Build an embed-like object with ``title`` and ``fields``."""
    def _make(title=None, fields=()):
        return SimpleNamespace(
            title=title,
            fields=[SimpleNamespace(name=name, value=value) for name, value in fields],
        )
    return _make


@pytest.fixture
def make_discord_message():
    """Build a mock ``discord.Message`` posted by the Saweria webhook."""
    def _make(
        content="",
        embeds=None,
        channel_id=WATCHED_CHANNEL_ID,
        webhook_id=WEBHOOK_ID,
        author_bot=True,
        author_id=WEBHOOK_ID,
        message_id=1234567890,
    ):
        message = Mock()
        message.content = content
        message.embeds = list(embeds or [])
        message.channel.id = channel_id
        message.webhook_id = webhook_id
        message.author.bot = author_bot
        message.author.id = author_id
        message.id = message_id
        message.created_at = MESSAGE_CREATED_AT
        message.react = AsyncMock()
        return message
    return _make


# Markers for test categorization
pytestmark = [
    pytest.mark.filterwarnings("ignore:.*unclosed.*:ResourceWarning"),
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
