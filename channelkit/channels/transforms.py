"""Transforms between wire-shaped and application-shaped forum records.

The API flattens emoji into ``emoji_id``/``emoji_name`` pairs while the
library nests them. All four functions are pure.
"""

from __future__ import annotations

from typing import Any, Mapping

from channelkit.channels.models import APIGuildForumDefaultReactionEmoji
from channelkit.channels.models import APIGuildForumTag
from channelkit.channels.models import DefaultReactionEmoji
from channelkit.channels.models import GuildForumTag
from channelkit.channels.models import GuildForumTagEmoji


def transform_api_guild_forum_tag(tag: Mapping[str, Any]) -> GuildForumTag:
    """Transform an API forum tag into a :class:`GuildForumTag`.

    The tag has an emoji when either ``emoji_id`` or ``emoji_name`` is set.
    Absent and null emoji fields both produce ``emoji=None``.
    """
    emoji_id = tag.get("emoji_id")
    emoji_name = tag.get("emoji_name")
    first_set = emoji_id if emoji_id is not None else emoji_name
    return GuildForumTag(
        id=tag.get("id"),
        name=tag.get("name"),
        moderated=tag.get("moderated"),
        emoji=GuildForumTagEmoji(id=emoji_id, name=emoji_name) if first_set else None,
    )


def transform_guild_forum_tag(tag: GuildForumTag) -> APIGuildForumTag:
    """Transform a :class:`GuildForumTag` into its API form."""
    return {
        "id": tag.id,
        "name": tag.name,
        "moderated": tag.moderated,
        "emoji_id": tag.emoji.id if tag.emoji is not None else None,
        "emoji_name": tag.emoji.name if tag.emoji is not None else None,
    }


def transform_api_guild_default_reaction(
    default_reaction: Mapping[str, Any],
) -> DefaultReactionEmoji:
    """Transform an API default reaction into a :class:`DefaultReactionEmoji`."""
    return DefaultReactionEmoji(
        id=default_reaction.get("emoji_id"),
        name=default_reaction.get("emoji_name"),
    )


def transform_guild_default_reaction(
    default_reaction: DefaultReactionEmoji,
) -> APIGuildForumDefaultReactionEmoji:
    """Transform a :class:`DefaultReactionEmoji` into its API form."""
    return {
        "emoji_id": default_reaction.id,
        "emoji_name": default_reaction.name,
    }
