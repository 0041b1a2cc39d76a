"""Channel factory: turns channel payloads into channel structures.

Classification happens in a fixed order:

1. Payloads without a ``guild_id`` and without a supplied guild are direct
   message channels. A payload carrying ``recipients`` becomes a DM unless its
   type is GROUP_DM, even if the type is something else entirely.
2. Everything else needs a guild, either the one supplied or the one cached on
   the client under the payload's ``guild_id``.
3. The guild channel type selects the structure.

New guild channels are then inserted into their guild's channel cache and,
for threads, into the parent channel's thread cache. Channels built with
``allow_from_unknown_guild`` are never cached.

Payloads that lead nowhere (an unknown type, an uncached guild) produce
``None`` rather than an exception.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, Type

from channelkit.channels.exceptions import MissingCapabilityError
from channelkit.channels.models import CacheRegistration
from channelkit.channels.models import ChannelBuild
from channelkit.channels.structures import AnnouncementChannel
from channelkit.channels.structures import BaseChannel
from channelkit.channels.structures import CategoryChannel
from channelkit.channels.structures import DirectoryChannel
from channelkit.channels.structures import DMChannel
from channelkit.channels.structures import ForumChannel
from channelkit.channels.structures import GuildChannel
from channelkit.channels.structures import MediaChannel
from channelkit.channels.structures import PartialGroupDMChannel
from channelkit.channels.structures import StageChannel
from channelkit.channels.structures import TextChannel
from channelkit.channels.structures import ThreadChannel
from channelkit.channels.structures import VoiceChannel
from channelkit.channels.structures import parse_snowflake
from channelkit.channels.types import THREAD_CHANNEL_TYPES
from channelkit.channels.types import ChannelType
from channelkit.channels.types import resolve_channel_type

if TYPE_CHECKING:
    from channelkit.client import Client
    from channelkit.client import Guild

logger = logging.getLogger(__name__)

GUILD_CHANNEL_CLASSES: dict[ChannelType, Type[GuildChannel]] = {
    ChannelType.GUILD_TEXT: TextChannel,
    ChannelType.GUILD_VOICE: VoiceChannel,
    ChannelType.GUILD_CATEGORY: CategoryChannel,
    ChannelType.GUILD_ANNOUNCEMENT: AnnouncementChannel,
    ChannelType.GUILD_STAGE_VOICE: StageChannel,
    ChannelType.ANNOUNCEMENT_THREAD: ThreadChannel,
    ChannelType.PUBLIC_THREAD: ThreadChannel,
    ChannelType.PRIVATE_THREAD: ThreadChannel,
    ChannelType.GUILD_DIRECTORY: DirectoryChannel,
    ChannelType.GUILD_FORUM: ForumChannel,
    ChannelType.GUILD_MEDIA: MediaChannel,
}


class ChannelFactory:
    """Builds channel structures for a client.

    The client must expose ``guilds.cache`` with a ``get`` method; this is
    checked once, when the factory is created.
    """

    def __init__(self, client: Client):
        guilds = getattr(client, "guilds", None)
        guild_cache = getattr(guilds, "cache", None)
        if guild_cache is None or not callable(getattr(guild_cache, "get", None)):
            raise MissingCapabilityError("guilds.cache", client)
        self.client = client

    def resolve_guild(
        self, data: Mapping[str, Any], guild: Optional[Guild] = None
    ) -> Optional[Guild]:
        """Return the supplied guild, or the cached guild named by the payload."""
        if guild is not None:
            return guild
        guild_id = data.get("guild_id")
        if not guild_id:
            return None
        snowflake = parse_snowflake(guild_id)
        if snowflake is None:
            return None
        return self.client.guilds.cache.get(snowflake)

    def build(
        self,
        data: Mapping[str, Any],
        guild: Optional[Guild] = None,
        *,
        allow_from_unknown_guild: bool = False,
    ) -> Optional[ChannelBuild]:
        """Classify and construct a channel without touching any cache.

        Args:
            data: Channel payload as received from the API
            guild: Guild the channel belongs to, if already known
            allow_from_unknown_guild: Build guild channels even when no guild
                resolves. Such builds carry no cache registrations.

        Returns:
            The channel with its pending cache registrations, or None
        """
        channel_type = resolve_channel_type(data.get("type"))

        if not data.get("guild_id") and guild is None:
            channel = self._build_dm(data, channel_type)
            if channel is None:
                return None
            return ChannelBuild(channel=channel)

        guild = self.resolve_guild(data, guild)
        if guild is None and not allow_from_unknown_guild:
            logger.debug(
                f"Skipping channel {data.get('id')}: guild {data.get('guild_id')} is not cached"
            )
            return None

        channel_cls = GUILD_CHANNEL_CLASSES.get(channel_type)
        if channel_cls is None:
            logger.debug(f"Skipping channel {data.get('id')}: unhandled type {data.get('type')!r}")
            return None

        channel = channel_cls(guild, data, self.client)
        if allow_from_unknown_guild:
            return ChannelBuild(channel=channel)
        return ChannelBuild(
            channel=channel,
            registrations=self._registrations(channel, guild),
        )

    def create(
        self,
        data: Mapping[str, Any],
        guild: Optional[Guild] = None,
        *,
        allow_from_unknown_guild: bool = False,
    ) -> Optional[BaseChannel]:
        """Build a channel and apply its cache registrations."""
        build = self.build(data, guild, allow_from_unknown_guild=allow_from_unknown_guild)
        if build is None:
            return None
        channel = build.apply()
        logger.debug(
            f"Created {type(channel).__name__} {channel.id}"
            f" ({len(build.registrations)} cache registrations)"
        )
        return channel

    def _build_dm(
        self, data: Mapping[str, Any], channel_type: Optional[ChannelType]
    ) -> Optional[BaseChannel]:
        if (
            data.get("recipients") is not None and channel_type != ChannelType.GROUP_DM
        ) or channel_type == ChannelType.DM:
            return DMChannel(self.client, data)
        if channel_type == ChannelType.GROUP_DM:
            return PartialGroupDMChannel(self.client, data)
        logger.debug(f"Skipping channel {data.get('id')}: no guild and not a DM")
        return None

    def _registrations(
        self, channel: GuildChannel, guild: Guild
    ) -> tuple[CacheRegistration, ...]:
        registrations = []

        if channel.type in THREAD_CHANNEL_TYPES:
            threads = getattr(channel.parent, "threads", None)
            if threads is not None:
                registrations.append(
                    CacheRegistration(
                        cache=threads.cache,
                        key=channel.id,
                        channel=channel,
                        label=f"threads of channel {channel.parent_id}",
                    )
                )

        channels = getattr(guild, "channels", None)
        if channels is not None:
            registrations.append(
                CacheRegistration(
                    cache=channels.cache,
                    key=channel.id,
                    channel=channel,
                    label=f"channels of guild {guild.id}",
                )
            )

        return tuple(registrations)


def create_channel(
    client: Client,
    data: Mapping[str, Any],
    guild: Optional[Guild] = None,
    *,
    allow_from_unknown_guild: bool = False,
) -> Optional[BaseChannel]:
    """Create a channel from API data and cache it where it belongs.

    Args:
        client: Client used to look up guilds and passed to the channel
        data: Channel payload as received from the API
        guild: Guild the channel belongs to, if already known
        allow_from_unknown_guild: Build guild channels even when their guild is
            unknown, without caching them

    Returns:
        The new channel, or None if the payload describes nothing to build
    """
    factory = getattr(client, "channel_factory", None)
    if not isinstance(factory, ChannelFactory):
        factory = ChannelFactory(client)
    return factory.create(data, guild, allow_from_unknown_guild=allow_from_unknown_guild)
