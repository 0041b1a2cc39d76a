"""Tests for forum tag and default reaction transforms."""

from __future__ import annotations

import pytest

from channelkit.channels.models import DefaultReactionEmoji
from channelkit.channels.models import GuildForumTag
from channelkit.channels.models import GuildForumTagEmoji
from channelkit.channels.transforms import transform_api_guild_default_reaction
from channelkit.channels.transforms import transform_api_guild_forum_tag
from channelkit.channels.transforms import transform_guild_default_reaction
from channelkit.channels.transforms import transform_guild_forum_tag


class TestForumTagTransforms:
    """Test conversion of forum tags between API and library shapes."""

    def test_api_tag_with_custom_emoji(self):
        tag = transform_api_guild_forum_tag({
            "id": "1",
            "name": "bug",
            "moderated": False,
            "emoji_id": "2",
            "emoji_name": "beetle",
        })

        assert tag == GuildForumTag(
            id="1",
            name="bug",
            moderated=False,
            emoji=GuildForumTagEmoji(id="2", name="beetle"),
        )

    def test_api_tag_with_unicode_emoji(self):
        tag = transform_api_guild_forum_tag({
            "id": "1",
            "name": "idea",
            "moderated": True,
            "emoji_id": None,
            "emoji_name": "💡",
        })

        assert tag.emoji == GuildForumTagEmoji(id=None, name="💡")
        assert tag.moderated is True

    def test_api_tag_with_only_emoji_id(self):
        tag = transform_api_guild_forum_tag({
            "id": "1", "name": "x", "moderated": False, "emoji_id": "9", "emoji_name": None,
        })

        assert tag.emoji == GuildForumTagEmoji(id="9", name=None)

    @pytest.mark.parametrize("emoji_fields", [
        {"emoji_id": None, "emoji_name": None},
        {},
        {"emoji_id": None, "emoji_name": ""},
    ])
    def test_api_tag_without_emoji(self, emoji_fields):
        """Test that null, missing and empty emoji fields all collapse to no emoji."""
        tag = transform_api_guild_forum_tag({"id": "1", "name": "plain", "moderated": False, **emoji_fields})

        assert tag.emoji is None

    def test_tag_to_api(self):
        api_tag = transform_guild_forum_tag(
            GuildForumTag(id="1", name="bug", moderated=True, emoji=GuildForumTagEmoji(id="2", name="beetle"))
        )

        assert api_tag == {
            "id": "1",
            "name": "bug",
            "moderated": True,
            "emoji_id": "2",
            "emoji_name": "beetle",
        }

    def test_tag_without_emoji_to_api(self):
        api_tag = transform_guild_forum_tag(GuildForumTag(id="1", name="plain", moderated=False))

        assert api_tag["emoji_id"] is None
        assert api_tag["emoji_name"] is None

    def test_round_trip_from_api(self):
        api_tag = {"id": "1", "name": "bug", "moderated": False, "emoji_id": "2", "emoji_name": "beetle"}

        assert transform_guild_forum_tag(transform_api_guild_forum_tag(api_tag)) == api_tag

    def test_missing_emoji_fields_normalize_to_nulls(self):
        """Test that absent emoji keys come back as explicit nulls."""
        api_tag = {"id": "1", "name": "plain", "moderated": False}

        result = transform_guild_forum_tag(transform_api_guild_forum_tag(api_tag))

        assert result == {**api_tag, "emoji_id": None, "emoji_name": None}
        assert transform_api_guild_forum_tag(result) == transform_api_guild_forum_tag(api_tag)

    def test_round_trip_from_library_shape(self):
        tag = GuildForumTag(id="1", name="idea", moderated=False, emoji=GuildForumTagEmoji(id=None, name="💡"))

        assert transform_api_guild_forum_tag(transform_guild_forum_tag(tag)) == tag

    def test_new_tag_without_id(self):
        """Test tags that have not been created yet and carry no id."""
        tag = GuildForumTag(id=None, name="new", moderated=False)

        assert transform_guild_forum_tag(tag)["id"] is None
        assert transform_api_guild_forum_tag(transform_guild_forum_tag(tag)) == tag


class TestDefaultReactionTransforms:
    """Test conversion of default reaction emoji."""

    def test_api_to_library(self):
        reaction = transform_api_guild_default_reaction({"emoji_id": "7", "emoji_name": "thumbsup"})

        assert reaction == DefaultReactionEmoji(id="7", name="thumbsup")

    def test_library_to_api(self):
        api_reaction = transform_guild_default_reaction(DefaultReactionEmoji(id=None, name="👍"))

        assert api_reaction == {"emoji_id": None, "emoji_name": "👍"}

    @pytest.mark.parametrize("api_reaction", [
        {"emoji_id": "7", "emoji_name": "thumbsup"},
        {"emoji_id": None, "emoji_name": "👍"},
        {"emoji_id": None, "emoji_name": None},
    ])
    def test_round_trip(self, api_reaction):
        """Test that reactions are renamed without collapsing nulls."""
        reaction = transform_api_guild_default_reaction(api_reaction)

        assert transform_guild_default_reaction(reaction) == api_reaction
        assert transform_api_guild_default_reaction(transform_guild_default_reaction(reaction)) == reaction
