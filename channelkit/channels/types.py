"""Channel type discriminators as they appear on the wire."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ChannelType(IntEnum):
    """Value of the ``type`` field on a channel payload."""

    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16

    @property
    def is_thread(self) -> bool:
        """Check if this type is one of the thread types."""
        return self in THREAD_CHANNEL_TYPES

    @property
    def is_guild(self) -> bool:
        """Check if channels of this type belong to a guild."""
        return self in GUILD_CHANNEL_TYPES


THREAD_CHANNEL_TYPES = frozenset({
    ChannelType.ANNOUNCEMENT_THREAD,
    ChannelType.PUBLIC_THREAD,
    ChannelType.PRIVATE_THREAD,
})

DM_CHANNEL_TYPES = frozenset({ChannelType.DM, ChannelType.GROUP_DM})

GUILD_CHANNEL_TYPES = frozenset(ChannelType) - DM_CHANNEL_TYPES


def resolve_channel_type(value: Any) -> ChannelType | None:
    """Coerce a raw ``type`` value, returning None for unknown values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return ChannelType(value)
    except ValueError:
        return None
