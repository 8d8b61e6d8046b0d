"""Process entry point: load config, build the page index, run the bot."""

import logging
import os
import sys

from dotenv import load_dotenv

from .config import BotConfig
from .pages import load_wiki_pages
from .runner import WikiBotRunner

logger = logging.getLogger("wiki_bot")


def configure_logging():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # httpx logs every request at INFO; discord.py is chatty about the gateway
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("discord").setLevel(logging.WARNING)


def main():
    load_dotenv()
    configure_logging()

    config = BotConfig.from_env()
    pages = load_wiki_pages(config.graphql_url)
    WikiBotRunner(config=config, pages=pages).start()


if __name__ == "__main__":
    main()
