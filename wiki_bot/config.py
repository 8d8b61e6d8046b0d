"""
Bot configuration and the guild allowlist.
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

DEFAULT_PORT = 3000
DEFAULT_COMMAND_DESCRIPTION = "Search Mix It Up Wiki"


def parse_allowed_guilds(raw: Optional[str]) -> FrozenSet[str]:
    """Parse a comma-separated list of guild IDs, ignoring blanks."""
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def is_allowed(guild_id: Optional[str], allowlist: FrozenSet[str]) -> bool:
    """Whether the bot may operate in a guild. An empty allowlist admits nobody."""
    if guild_id is None:
        return False
    return str(guild_id) in allowlist


@dataclass(frozen=True)
class BotConfig:
    """Configuration for the wiki bot.

    Required:
        graphql_url: Wiki GraphQL endpoint the page index is loaded from
        wiki_base_url: Base URL page links are built on

    Optional:
        allowed_guilds: Guild IDs the bot may operate in (empty = none)
        port: Port for the /status health server
        command_description: Description shown for the /wiki command
    """

    graphql_url: str
    wiki_base_url: str
    allowed_guilds: FrozenSet[str] = field(default_factory=frozenset)
    port: int = DEFAULT_PORT
    command_description: str = DEFAULT_COMMAND_DESCRIPTION

    @classmethod
    def from_env(cls) -> "BotConfig":
        graphql_url = os.environ.get("WIKI_GRAPHQL_URL")
        wiki_base_url = os.environ.get("WIKI_BASE_URL")
        if not graphql_url or not wiki_base_url:
            raise ValueError("Missing WIKI_GRAPHQL_URL or WIKI_BASE_URL")

        return cls(
            graphql_url=graphql_url,
            wiki_base_url=wiki_base_url,
            allowed_guilds=parse_allowed_guilds(os.environ.get("ALLOWED_GUILDS")),
            port=int(os.environ.get("PORT") or DEFAULT_PORT),
        )

    def page_url(self, path: str) -> str:
        return f"{self.wiki_base_url.rstrip('/')}/{path}"
