"""Logging setup for applications embedding channelkit."""

from __future__ import annotations

import logging

from channelkit.shared.config import Settings
from channelkit.shared.config import get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings.

    Args:
        settings: Settings to read level and format from. Defaults to the
            global settings instance.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.effective_log_level),
        format=settings.log_format,
        force=True,
    )
    logging.getLogger("channelkit").debug(
        f"Logging configured at {settings.effective_log_level} ({settings.environment})"
    )
