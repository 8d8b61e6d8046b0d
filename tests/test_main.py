"""Tests for wiki_bot.__main__"""

from unittest.mock import patch

from wiki_bot.__main__ import main


@patch.dict(
    "os.environ",
    {
        "WIKI_GRAPHQL_URL": "https://wiki/graphql",
        "WIKI_BASE_URL": "https://wiki",
        "ALLOWED_GUILDS": "111",
    },
    clear=True,
)
@patch("wiki_bot.__main__.load_dotenv")
@patch("wiki_bot.__main__.WikiBotRunner")
@patch("wiki_bot.__main__.load_wiki_pages", return_value=[])
def test_main_loads_index_before_starting(mock_load, mock_runner_class, mock_dotenv):
    """The index is fetched once, then handed to the runner."""
    main()

    mock_dotenv.assert_called_once()
    mock_load.assert_called_once_with("https://wiki/graphql")
    config = mock_runner_class.call_args.kwargs["config"]
    assert config.allowed_guilds == frozenset({"111"})
    assert mock_runner_class.call_args.kwargs["pages"] == []
    mock_runner_class.return_value.start.assert_called_once_with()
