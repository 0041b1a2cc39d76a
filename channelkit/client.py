"""Client and guild contexts that own channel caches."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import hikari

from channelkit.channels.collection import CachingManager
from channelkit.channels.factory import ChannelFactory
from channelkit.channels.structures import BaseChannel
from channelkit.channels.structures import GuildChannel
from channelkit.shared.config import Settings
from channelkit.shared.config import get_settings

logger = logging.getLogger(__name__)


class GuildChannelManager(CachingManager[hikari.Snowflake, GuildChannel]):
    """Channel cache of a guild."""

    @property
    def guild(self) -> Guild:
        return self.owner


class Guild:
    """Guild context: an id, a name and the guild's channel cache."""

    def __init__(self, client: Optional[Client], data: Mapping[str, Any]):
        self.client = client
        self.id = hikari.Snowflake(data["id"])
        self.name: Optional[str] = data.get("name")
        self.channels = GuildChannelManager(self)

    def __repr__(self) -> str:
        return f"Guild(id={self.id}, name={self.name!r})"


class GuildManager(CachingManager[hikari.Snowflake, Guild]):
    """Guild cache of a client."""

    def add(self, data: Mapping[str, Any]) -> Guild:
        """Construct a guild from a payload and cache it, replacing any previous entry."""
        guild = Guild(self.owner, data)
        self.cache.set(guild.id, guild)
        return guild


class Client:
    """Session context handed to channel constructors.

    The client resolves guilds by id and owns the channel factory used to
    materialize channel payloads.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.guilds = GuildManager(self)
        self.channel_factory = ChannelFactory(self)

    def add_guild(self, data: Mapping[str, Any]) -> Guild:
        guild = self.guilds.add(data)
        logger.debug(f"Cached guild {guild.id}")
        return guild

    def create_channel(
        self,
        data: Mapping[str, Any],
        guild: Optional[Guild] = None,
        *,
        allow_from_unknown_guild: Optional[bool] = None,
    ) -> Optional[BaseChannel]:
        """Materialize a channel payload.

        Args:
            data: Channel payload as received from the API
            guild: Guild the channel belongs to, if already known
            allow_from_unknown_guild: Build guild channels even when their guild
                is not cached. Defaults to the client's settings.

        Returns:
            The new channel, or None if the payload describes nothing to build
        """
        if allow_from_unknown_guild is None:
            allow_from_unknown_guild = self.settings.allow_from_unknown_guild
        return self.channel_factory.create(
            data, guild, allow_from_unknown_guild=allow_from_unknown_guild
        )
