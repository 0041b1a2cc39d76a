"""Channel structures built from API payloads.

Guild channels are constructed as ``(guild, data, client)`` and direct message
channels as ``(client, data)``. ``guild`` is None only for channels built from
a guild the client has not cached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

import hikari

from channelkit.channels.collection import CachingManager
from channelkit.channels.collection import Collection
from channelkit.channels.models import DefaultReactionEmoji
from channelkit.channels.models import GuildForumTag
from channelkit.channels.transforms import transform_api_guild_default_reaction
from channelkit.channels.transforms import transform_api_guild_forum_tag
from channelkit.channels.transforms import transform_guild_default_reaction
from channelkit.channels.transforms import transform_guild_forum_tag
from channelkit.channels.types import ChannelType
from channelkit.channels.types import resolve_channel_type

if TYPE_CHECKING:
    from channelkit.client import Client
    from channelkit.client import Guild


def _snowflake(value: Any) -> Optional[hikari.Snowflake]:
    """Convert an optional wire id into a Snowflake."""
    if value is None:
        return None
    return hikari.Snowflake(value)


def parse_snowflake(value: Any) -> Optional[hikari.Snowflake]:
    """Parse an id that may be malformed, returning None when it is."""
    try:
        return hikari.Snowflake(value)
    except (TypeError, ValueError):
        return None


def _id_str(value: Optional[hikari.Snowflake]) -> Optional[str]:
    return str(value) if value is not None else None


class BaseChannel:
    """Fields every channel payload carries."""

    def __init__(self, client: Optional[Client], data: Mapping[str, Any]):
        self.client = client
        self.id = hikari.Snowflake(data["id"])
        self.type: Optional[ChannelType] = resolve_channel_type(data.get("type"))
        self.raw_type = data.get("type")
        self._patch(data)

    def _patch(self, data: Mapping[str, Any]) -> None:
        self.flags: int = data.get("flags", 0)

    @property
    def is_thread(self) -> bool:
        return self.type is not None and self.type.is_thread

    @property
    def is_dm_based(self) -> bool:
        return self.type in (ChannelType.DM, ChannelType.GROUP_DM)

    def to_payload(self) -> dict[str, Any]:
        """Serialize the channel back into its API form."""
        return {
            "id": str(self.id),
            "type": int(self.type) if self.type is not None else self.raw_type,
            "flags": self.flags,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseChannel):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id}, type={self.type!r})"


class ThreadManager(CachingManager[hikari.Snowflake, "ThreadChannel"]):
    """Thread cache of a channel that can host threads."""

    @property
    def channel(self) -> GuildChannel:
        return self.owner

    def active(self) -> Collection[hikari.Snowflake, ThreadChannel]:
        """Return cached threads that are not archived."""
        return self.cache.filter(lambda thread: not thread.archived)


class GuildChannel(BaseChannel):
    """Base for every channel that lives in a guild."""

    def __init__(
        self,
        guild: Optional[Guild],
        data: Mapping[str, Any],
        client: Optional[Client] = None,
    ):
        self.guild = guild
        if client is None and guild is not None:
            client = guild.client
        super().__init__(client, data)

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        if self.guild is not None:
            self.guild_id = self.guild.id
        else:
            self.guild_id = parse_snowflake(data.get("guild_id"))
        self.name: Optional[str] = data.get("name")
        self.position: int = data.get("position", 0)
        self.parent_id = _snowflake(data.get("parent_id"))
        self.nsfw: bool = data.get("nsfw", False)
        self.permission_overwrites: list[dict[str, Any]] = list(
            data.get("permission_overwrites") or []
        )

    @property
    def parent(self) -> Optional[GuildChannel]:
        """The category, or for threads the channel, this channel sits under."""
        if self.parent_id is None or self.guild is None:
            return None
        channels = getattr(self.guild, "channels", None)
        if channels is None:
            return None
        return channels.cache.get(self.parent_id)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            guild_id=_id_str(self.guild_id),
            name=self.name,
            position=self.position,
            parent_id=_id_str(self.parent_id),
            nsfw=self.nsfw,
            permission_overwrites=list(self.permission_overwrites),
        )
        return payload


class TextChannel(GuildChannel):
    """Guild text channel."""

    def __init__(self, guild, data, client=None):
        self.threads = ThreadManager(self)
        super().__init__(guild, data, client)

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        self.topic: Optional[str] = data.get("topic")
        self.rate_limit_per_user: int = data.get("rate_limit_per_user", 0)
        self.last_message_id = _snowflake(data.get("last_message_id"))
        self.default_auto_archive_duration: Optional[int] = data.get(
            "default_auto_archive_duration"
        )

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            topic=self.topic,
            rate_limit_per_user=self.rate_limit_per_user,
            last_message_id=_id_str(self.last_message_id),
            default_auto_archive_duration=self.default_auto_archive_duration,
        )
        return payload


class AnnouncementChannel(TextChannel):
    """Guild announcement channel whose messages can be followed."""


class VoiceChannel(GuildChannel):
    """Guild voice channel."""

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        self.bitrate: Optional[int] = data.get("bitrate")
        self.user_limit: int = data.get("user_limit", 0)
        self.rtc_region: Optional[str] = data.get("rtc_region")
        self.video_quality_mode: Optional[int] = data.get("video_quality_mode")
        self.rate_limit_per_user: int = data.get("rate_limit_per_user", 0)
        self.last_message_id = _snowflake(data.get("last_message_id"))

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            bitrate=self.bitrate,
            user_limit=self.user_limit,
            rtc_region=self.rtc_region,
            video_quality_mode=self.video_quality_mode,
            rate_limit_per_user=self.rate_limit_per_user,
            last_message_id=_id_str(self.last_message_id),
        )
        return payload


class StageChannel(VoiceChannel):
    """Guild stage channel."""

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        self.topic: Optional[str] = data.get("topic")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["topic"] = self.topic
        return payload


class CategoryChannel(GuildChannel):
    """Guild category grouping other channels."""

    @property
    def children(self) -> Collection[hikari.Snowflake, GuildChannel]:
        """Cached guild channels whose parent is this category."""
        channels = getattr(self.guild, "channels", None)
        if channels is None:
            return Collection()
        return channels.cache.filter(lambda channel: channel.parent_id == self.id)


class DirectoryChannel(GuildChannel):
    """Channel listing the servers of a student hub."""


class ThreadOnlyChannel(GuildChannel):
    """Base for forum and media channels, which only contain threads."""

    def __init__(self, guild, data, client=None):
        self.threads = ThreadManager(self)
        super().__init__(guild, data, client)

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        self.topic: Optional[str] = data.get("topic")
        self.rate_limit_per_user: int = data.get("rate_limit_per_user", 0)
        self.available_tags: list[GuildForumTag] = [
            transform_api_guild_forum_tag(tag) for tag in data.get("available_tags") or []
        ]
        default_reaction = data.get("default_reaction_emoji")
        self.default_reaction_emoji: Optional[DefaultReactionEmoji] = (
            transform_api_guild_default_reaction(default_reaction)
            if default_reaction
            else None
        )
        self.default_thread_rate_limit_per_user: Optional[int] = data.get(
            "default_thread_rate_limit_per_user"
        )
        self.default_auto_archive_duration: Optional[int] = data.get(
            "default_auto_archive_duration"
        )
        self.default_sort_order: Optional[int] = data.get("default_sort_order")

    def get_tag(self, tag_id: Any) -> Optional[GuildForumTag]:
        """Find an available tag by id."""
        tag_id = str(tag_id)
        return next((tag for tag in self.available_tags if tag.id == tag_id), None)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            topic=self.topic,
            rate_limit_per_user=self.rate_limit_per_user,
            available_tags=[transform_guild_forum_tag(tag) for tag in self.available_tags],
            default_reaction_emoji=(
                transform_guild_default_reaction(self.default_reaction_emoji)
                if self.default_reaction_emoji is not None
                else None
            ),
            default_thread_rate_limit_per_user=self.default_thread_rate_limit_per_user,
            default_auto_archive_duration=self.default_auto_archive_duration,
            default_sort_order=self.default_sort_order,
        )
        return payload


class ForumChannel(ThreadOnlyChannel):
    """Guild forum channel."""

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        self.default_forum_layout: Optional[int] = data.get("default_forum_layout")

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["default_forum_layout"] = self.default_forum_layout
        return payload


class MediaChannel(ThreadOnlyChannel):
    """Guild media channel."""


class ThreadChannel(GuildChannel):
    """Announcement, public or private thread.

    ``parent`` resolves to the channel the thread was started in, which holds
    the thread in its ``threads`` cache.
    """

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        self.owner_id = _snowflake(data.get("owner_id"))
        self.last_message_id = _snowflake(data.get("last_message_id"))
        self.rate_limit_per_user: int = data.get("rate_limit_per_user", 0)
        self.message_count: Optional[int] = data.get("message_count")
        self.member_count: Optional[int] = data.get("member_count")
        self.applied_tags = [hikari.Snowflake(tag_id) for tag_id in data.get("applied_tags") or []]

        metadata = data.get("thread_metadata") or {}
        self.archived: bool = metadata.get("archived", False)
        self.locked: bool = metadata.get("locked", False)
        self.invitable: Optional[bool] = metadata.get("invitable")
        self.auto_archive_duration: Optional[int] = metadata.get("auto_archive_duration")
        self.archive_timestamp: Optional[str] = metadata.get("archive_timestamp")

    @property
    def is_private(self) -> bool:
        return self.type == ChannelType.PRIVATE_THREAD

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            owner_id=_id_str(self.owner_id),
            last_message_id=_id_str(self.last_message_id),
            rate_limit_per_user=self.rate_limit_per_user,
            message_count=self.message_count,
            member_count=self.member_count,
            applied_tags=[str(tag_id) for tag_id in self.applied_tags],
            thread_metadata={
                "archived": self.archived,
                "locked": self.locked,
                "invitable": self.invitable,
                "auto_archive_duration": self.auto_archive_duration,
                "archive_timestamp": self.archive_timestamp,
            },
        )
        return payload


class DMChannel(BaseChannel):
    """Direct message channel with a single user."""

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        recipients = data.get("recipients") or []
        self.recipient_id = _snowflake(recipients[0].get("id")) if recipients else None
        self.last_message_id = _snowflake(data.get("last_message_id"))

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            recipients=[{"id": str(self.recipient_id)}] if self.recipient_id is not None else [],
            last_message_id=_id_str(self.last_message_id),
        )
        return payload


class PartialGroupDMChannel(BaseChannel):
    """Group direct message channel known only from a partial payload."""

    def _patch(self, data: Mapping[str, Any]) -> None:
        super()._patch(data)
        self.name: Optional[str] = data.get("name")
        self.icon: Optional[str] = data.get("icon")
        self.recipients: list[dict[str, Any]] = list(data.get("recipients") or [])
        self.owner_id = _snowflake(data.get("owner_id"))

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(
            name=self.name,
            icon=self.icon,
            recipients=list(self.recipients),
            owner_id=_id_str(self.owner_id),
        )
        return payload
