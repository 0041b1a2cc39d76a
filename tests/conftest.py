"""Test configuration and fixtures for channelkit."""

from __future__ import annotations

from typing import Any, Callable, Dict

import pytest

from channelkit.channels.types import ChannelType
from channelkit.client import Client
from channelkit.client import Guild
from channelkit.shared.config import Settings
from channelkit.shared.config import override_settings


GUILD_ID = "81384788765712384"


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return override_settings(
        environment="testing",
        debug=False,
        log_level="DEBUG",
    )


@pytest.fixture
def client(test_settings) -> Client:
    """Client with no cached guilds."""
    return Client(settings=test_settings)


@pytest.fixture
def guild(client) -> Guild:
    """Guild cached on the client."""
    return client.add_guild({"id": GUILD_ID, "name": "Test Guild"})


@pytest.fixture
def make_payload() -> Callable[..., Dict[str, Any]]:
    """Build channel payloads with sequential ids."""
    counter = {"next": 1000}

    def _make(channel_type: ChannelType | int, **fields: Any) -> Dict[str, Any]:
        counter["next"] += 1
        payload: Dict[str, Any] = {
            "id": str(counter["next"]),
            "type": int(channel_type),
        }
        payload.update(fields)
        return payload

    return _make
