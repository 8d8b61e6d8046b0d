"""
WikiBotRunner — decides what the bot does for each platform event.

The runner owns:
- The page index and allowlist (both fixed for the life of the process)
- The /wiki command logic (autocomplete suggestions, link replies)
- Guild admission (deploy commands or leave)

Every handler is a plain function of its inputs that returns an action.
The adapter (e.g., DiscordAdapter) owns the platform connection and carries
the actions out.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .commands import WIKI_COMMAND
from .config import BotConfig, is_allowed
from .pages import WikiPage
from .search import Candidate, find_page, is_sentinel, search_pages

logger = logging.getLogger(__name__)

DENIAL_MESSAGE = "This bot is not authorized to operate in this server."
INVALID_SELECTION_MESSAGE = "Please select a valid wiki page."
UNKNOWN_PAGE_TITLE = "Unknown Page"


@dataclass(frozen=True)
class Reply:
    """Send a message in response to an interaction."""

    content: str
    ephemeral: bool = False


@dataclass(frozen=True)
class Suggest:
    """Answer an autocomplete interaction with choices."""

    candidates: Tuple[Candidate, ...]


@dataclass(frozen=True)
class Deploy:
    """Register the command schema in a guild."""

    guild_id: str


@dataclass(frozen=True)
class Leave:
    """Remove the bot from a guild."""

    guild_id: str
    guild_name: str = ""


InteractionAction = Union[Reply, Suggest]
GuildAction = Union[Deploy, Leave]


class WikiBotRunner:
    """
    Core dispatcher for the wiki bot.

        config = BotConfig.from_env()
        pages = load_wiki_pages(config.graphql_url)
        WikiBotRunner(config=config, pages=pages).start()
    """

    def __init__(self, config: BotConfig, pages: Sequence[WikiPage], adapter=None):
        self.config = config
        self.pages: Tuple[WikiPage, ...] = tuple(pages)

        # Default to Discord adapter (lazy import avoids requiring tokens at import time)
        if adapter is not None:
            self.adapter = adapter
        else:
            from .discord_adapter import DiscordAdapter

            self.adapter = DiscordAdapter()

    def is_allowed(self, guild_id: Optional[str]) -> bool:
        return is_allowed(guild_id, self.config.allowed_guilds)

    def handle_autocomplete(
        self, guild_id: Optional[str], focused_value: str
    ) -> InteractionAction:
        """
        Suggest pages for a partially typed query.

        Args:
            guild_id: Guild the interaction came from (None for DMs)
            focused_value: Current text of the focused option

        Returns:
            Suggest with candidates, or a denial Reply for unknown guilds
        """
        if not self.is_allowed(guild_id):
            logger.info(f"Denied autocomplete from guild {guild_id}")
            return Reply(DENIAL_MESSAGE, ephemeral=True)

        return Suggest(tuple(search_pages(self.pages, focused_value)))

    def handle_command(
        self, guild_id: Optional[str], command_name: str, query: Optional[str]
    ) -> Optional[Reply]:
        """
        Answer a /wiki invocation with a link to the selected page.

        Args:
            guild_id: Guild the interaction came from (None for DMs)
            command_name: Name of the invoked command
            query: Submitted value of the `query` option (a page path)

        Returns:
            The reply to send, or None for commands this bot does not own
        """
        if not self.is_allowed(guild_id):
            logger.info(f"Denied /{command_name} from guild {guild_id}")
            return Reply(DENIAL_MESSAGE, ephemeral=True)

        if command_name != WIKI_COMMAND:
            return None

        if not query or is_sentinel(query):
            return Reply(INVALID_SELECTION_MESSAGE, ephemeral=True)

        page = find_page(self.pages, query)
        title = page.title if page else UNKNOWN_PAGE_TITLE
        return Reply(f"**{title}**: {self.config.page_url(query)}", ephemeral=False)

    def handle_guild_join(self, guild_id: str, guild_name: str = "") -> GuildAction:
        """Deploy commands to an allowlisted guild, leave any other."""
        logger.info(f"Attempting to join: {guild_name} ({guild_id})")
        if self.is_allowed(guild_id):
            return Deploy(str(guild_id))

        logger.info(f"{guild_name} ({guild_id}) is not on the allowlist. Leaving...")
        return Leave(str(guild_id), guild_name)

    def handle_ready(self, guilds: Iterable[Tuple[str, str]]) -> List[GuildAction]:
        """Apply the allowlist to every (guild_id, guild_name) the bot is already in."""
        actions: List[GuildAction] = []
        for guild_id, guild_name in guilds:
            if self.is_allowed(guild_id):
                actions.append(Deploy(str(guild_id)))
            else:
                logger.info(
                    f"Guild {guild_name} ({guild_id}) is not on the allowlist. Disabling..."
                )
                actions.append(Leave(str(guild_id), guild_name))
        return actions

    def start(self, **adapter_kwargs):
        """Start the bot via its adapter.

        Args:
            **adapter_kwargs: Passed to adapter.start() (e.g., serve_status=False).
        """
        logger.info(
            f"Starting wiki bot with {len(self.pages)} pages "
            f"for {len(self.config.allowed_guilds)} allowed guilds..."
        )
        self.adapter.start(self, **adapter_kwargs)
