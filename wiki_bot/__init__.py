"""
wiki-bot: Discord slash-command bridge to a wiki's GraphQL page index.

Usage:
    from wiki_bot import BotConfig, WikiBotRunner, load_wiki_pages

    config = BotConfig.from_env()
    pages = load_wiki_pages(config.graphql_url)
    WikiBotRunner(config=config, pages=pages).start()

Or run the packaged entry point:

    python -m wiki_bot
"""

from .config import BotConfig, is_allowed, parse_allowed_guilds
from .pages import WikiPage, load_wiki_pages
from .runner import Deploy, Leave, Reply, Suggest, WikiBotRunner
from .search import Candidate, find_page, search_pages

__all__ = [
    "WikiBotRunner",
    "BotConfig",
    "WikiPage",
    "Candidate",
    "load_wiki_pages",
    "search_pages",
    "find_page",
    "is_allowed",
    "parse_allowed_guilds",
    "Reply",
    "Suggest",
    "Deploy",
    "Leave",
]
__version__ = "1.0.0"
