"""Tests for settings and logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from channelkit.client import Client
from channelkit.channels.types import ChannelType
from channelkit.shared.config import Settings
from channelkit.shared.config import get_settings
from channelkit.shared.config import override_settings
from channelkit.shared.log_config import configure_logging


class TestSettings:
    """Test settings validation and environment handling."""

    def test_defaults(self):
        settings = Settings()

        assert settings.environment in {"development", "testing", "production"}
        assert isinstance(settings.allow_from_unknown_guild, bool)
        assert "%(message)s" in settings.log_format

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            override_settings(environment="staging")

    def test_log_level_is_upper_cased(self):
        assert override_settings(log_level="warning").log_level == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            override_settings(log_level="LOUD")

    def test_environment_properties(self):
        settings = override_settings(environment="production")

        assert settings.is_production
        assert not settings.is_development
        assert not settings.is_testing

    def test_debug_forces_debug_level(self):
        settings = override_settings(log_level="ERROR", debug=True)

        assert settings.effective_log_level == "DEBUG"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("CHANNELKIT_ALLOW_FROM_UNKNOWN_GUILD", "true")
        monkeypatch.setenv("CHANNELKIT_LOG_LEVEL", "error")

        settings = Settings()

        assert settings.allow_from_unknown_guild is True
        assert settings.log_level == "ERROR"

    def test_get_settings_returns_global_instance(self):
        assert get_settings() is get_settings()


class TestClientSettings:
    """Test that the client applies settings to channel creation."""

    def test_client_uses_allow_from_unknown_guild_setting(self, make_payload):
        client = Client(settings=override_settings(environment="testing", allow_from_unknown_guild=True))
        payload = make_payload(ChannelType.GUILD_TEXT, guild_id="1234")

        assert client.create_channel(payload) is not None
        assert client.create_channel(payload, allow_from_unknown_guild=False) is None

    def test_client_defaults_to_strict(self, client, make_payload):
        payload = make_payload(ChannelType.GUILD_TEXT, guild_id="1234")

        assert client.create_channel(payload) is None
        assert client.create_channel(payload, allow_from_unknown_guild=True) is not None


class TestConfigureLogging:
    """Test logging setup."""

    def test_configures_root_logger(self):
        settings = override_settings(log_level="WARNING", log_format="%(message)s")

        with patch("channelkit.shared.log_config.logging.basicConfig") as mock_basic_config:
            configure_logging(settings)

        mock_basic_config.assert_called_once_with(
            level=logging.WARNING,
            format="%(message)s",
            force=True,
        )

    def test_debug_mode(self):
        with patch("channelkit.shared.log_config.logging.basicConfig") as mock_basic_config:
            configure_logging(override_settings(debug=True))

        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_uses_global_settings_by_default(self):
        with patch("channelkit.shared.log_config.logging.basicConfig") as mock_basic_config:
            configure_logging()

        assert mock_basic_config.call_args.kwargs["format"] == get_settings().log_format


class TestPackaging:
    """Test that shared modules ship as a regular package."""

    def test_shared_is_regular_package(self):
        import channelkit.shared

        assert channelkit.shared.__file__ is not None
        assert channelkit.shared.__file__.endswith("__init__.py")
