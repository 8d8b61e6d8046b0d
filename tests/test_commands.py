"""Tests for wiki_bot.commands"""

from wiki_bot.commands import wiki_command_schema


class TestWikiCommandSchema:
    def test_command_shape(self):
        schema = wiki_command_schema()
        assert schema["name"] == "wiki"
        assert schema["type"] == 1
        assert schema["description"] == "Search Mix It Up Wiki"

    def test_query_option(self):
        (option,) = wiki_command_schema()["options"]
        assert option["name"] == "query"
        assert option["type"] == 3
        assert option["required"] is True
        assert option["autocomplete"] is True

    def test_requires_manage_messages(self):
        assert wiki_command_schema()["default_member_permissions"] == "8192"

    def test_custom_description(self):
        assert wiki_command_schema("Search Docs")["description"] == "Search Docs"
