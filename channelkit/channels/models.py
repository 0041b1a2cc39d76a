"""Records shared by the channel factory and the schema transforms.

Application-facing records are immutable dataclasses. Wire records are plain
dictionaries, described here with ``TypedDict`` for reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING, Any, Optional, TypedDict

import hikari

if TYPE_CHECKING:
    from channelkit.channels.structures import BaseChannel


class APIGuildForumTag(TypedDict, total=False):
    """Forum tag as sent by the API."""

    id: str
    name: str
    moderated: bool
    emoji_id: Optional[str]
    emoji_name: Optional[str]


class APIGuildForumDefaultReactionEmoji(TypedDict):
    """Default reaction of a forum or media channel as sent by the API."""

    emoji_id: Optional[str]
    emoji_name: Optional[str]


@dataclass(frozen=True)
class GuildForumTagEmoji:
    """Emoji shown next to a forum tag.

    ``id`` is set for custom emoji, ``name`` for unicode emoji.
    """

    id: Optional[str]
    name: Optional[str]


@dataclass(frozen=True)
class GuildForumTag:
    """Tag that can be applied to threads in a forum or media channel."""

    id: Optional[str]
    name: str
    moderated: bool
    emoji: Optional[GuildForumTagEmoji] = None


@dataclass(frozen=True)
class DefaultReactionEmoji:
    """Emoji added to new posts in a forum or media channel."""

    id: Optional[str]
    name: Optional[str]


@dataclass(frozen=True, eq=False)
class CacheRegistration:
    """Pending insertion of a channel into a cache.

    The cache only needs a ``set(key, value)`` method.
    """

    cache: Any
    key: hikari.Snowflake
    channel: BaseChannel
    label: str

    def apply(self) -> None:
        self.cache.set(self.key, self.channel)


@dataclass(frozen=True)
class ChannelBuild:
    """Outcome of classifying and constructing a channel payload.

    Holds the new channel together with the cache insertions that should
    follow. Builds for channels of unknown guilds carry no registrations.
    """

    channel: BaseChannel
    registrations: tuple[CacheRegistration, ...] = field(default_factory=tuple)

    def apply(self) -> BaseChannel:
        """Perform every registration in order and return the channel."""
        for registration in self.registrations:
            registration.apply()
        return self.channel
