"""Channel structures, the channel factory and forum schema transforms."""

from channelkit.channels.factory import ChannelFactory, create_channel
from channelkit.channels.models import (
    CacheRegistration,
    ChannelBuild,
    DefaultReactionEmoji,
    GuildForumTag,
    GuildForumTagEmoji,
)
from channelkit.channels.structures import (
    AnnouncementChannel,
    BaseChannel,
    CategoryChannel,
    DirectoryChannel,
    DMChannel,
    ForumChannel,
    GuildChannel,
    MediaChannel,
    PartialGroupDMChannel,
    StageChannel,
    TextChannel,
    ThreadChannel,
    VoiceChannel,
)
from channelkit.channels.transforms import (
    transform_api_guild_default_reaction,
    transform_api_guild_forum_tag,
    transform_guild_default_reaction,
    transform_guild_forum_tag,
)
from channelkit.channels.types import ChannelType

__all__ = [
    "AnnouncementChannel",
    "BaseChannel",
    "CacheRegistration",
    "CategoryChannel",
    "ChannelBuild",
    "ChannelFactory",
    "ChannelType",
    "DefaultReactionEmoji",
    "DirectoryChannel",
    "DMChannel",
    "ForumChannel",
    "GuildChannel",
    "GuildForumTag",
    "GuildForumTagEmoji",
    "MediaChannel",
    "PartialGroupDMChannel",
    "StageChannel",
    "TextChannel",
    "ThreadChannel",
    "VoiceChannel",
    "create_channel",
    "transform_api_guild_default_reaction",
    "transform_api_guild_forum_tag",
    "transform_guild_default_reaction",
    "transform_guild_forum_tag",
]
