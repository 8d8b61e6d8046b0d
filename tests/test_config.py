"""Tests for wiki_bot.config"""

from unittest.mock import patch

import pytest

from wiki_bot.config import (
    DEFAULT_COMMAND_DESCRIPTION,
    DEFAULT_PORT,
    BotConfig,
    is_allowed,
    parse_allowed_guilds,
)


class TestParseAllowedGuilds:
    def test_comma_separated(self):
        assert parse_allowed_guilds("111,222") == frozenset({"111", "222"})

    def test_strips_whitespace_and_blanks(self):
        assert parse_allowed_guilds(" 111 , ,222,, ") == frozenset({"111", "222"})

    @pytest.mark.parametrize("raw", [None, "", " , "])
    def test_empty(self, raw):
        assert parse_allowed_guilds(raw) == frozenset()


class TestIsAllowed:
    def test_member(self):
        assert is_allowed("111", frozenset({"111", "222"}))

    def test_non_member(self):
        assert not is_allowed("333", frozenset({"111", "222"}))

    @pytest.mark.parametrize("guild_id", ["111", "0", "", "anything"])
    def test_empty_allowlist_denies_everyone(self, guild_id):
        assert not is_allowed(guild_id, frozenset())

    def test_missing_guild_denied(self):
        assert not is_allowed(None, frozenset({"111"}))

    def test_int_guild_id(self):
        assert is_allowed(111, frozenset({"111"}))


class TestBotConfig:
    def test_defaults(self):
        config = BotConfig(graphql_url="https://wiki/graphql", wiki_base_url="https://wiki")
        assert config.allowed_guilds == frozenset()
        assert config.port == DEFAULT_PORT == 3000
        assert config.command_description == DEFAULT_COMMAND_DESCRIPTION

    def test_page_url(self):
        config = BotConfig(graphql_url="https://wiki/graphql", wiki_base_url="https://wiki")
        assert config.page_url("setup") == "https://wiki/setup"

    def test_page_url_trailing_slash(self):
        config = BotConfig(graphql_url="https://wiki/graphql", wiki_base_url="https://wiki/")
        assert config.page_url("setup") == "https://wiki/setup"

    @patch.dict(
        "os.environ",
        {
            "WIKI_GRAPHQL_URL": "https://wiki/graphql",
            "WIKI_BASE_URL": "https://wiki",
            "ALLOWED_GUILDS": "111, 222",
            "PORT": "8080",
        },
        clear=True,
    )
    def test_from_env(self):
        config = BotConfig.from_env()
        assert config.graphql_url == "https://wiki/graphql"
        assert config.wiki_base_url == "https://wiki"
        assert config.allowed_guilds == frozenset({"111", "222"})
        assert config.port == 8080

    @patch.dict(
        "os.environ",
        {"WIKI_GRAPHQL_URL": "https://wiki/graphql", "WIKI_BASE_URL": "https://wiki"},
        clear=True,
    )
    def test_from_env_defaults(self):
        config = BotConfig.from_env()
        assert config.allowed_guilds == frozenset()
        assert config.port == 3000

    @patch.dict("os.environ", {"WIKI_BASE_URL": "https://wiki"}, clear=True)
    def test_from_env_missing_url_raises(self):
        with pytest.raises(ValueError, match="Missing WIKI_GRAPHQL_URL or WIKI_BASE_URL"):
            BotConfig.from_env()
