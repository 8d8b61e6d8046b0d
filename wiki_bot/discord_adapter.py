"""
DiscordAdapter — Discord interface for the wiki bot.

Handles the gateway connection, event routing, command registration and
interaction responses. Every decision is delegated to WikiBotRunner; this
module only translates between discord.py objects and runner actions.
"""

import asyncio
import logging
import os
from typing import Dict, Optional

import discord
from discord import app_commands

from .commands import QUERY_OPTION, wiki_command_schema
from .health import create_server
from .runner import Deploy, Leave, Reply, Suggest

logger = logging.getLogger(__name__)


def get_option_value(data: Optional[Dict], name: str) -> Optional[str]:
    """Value of a top-level option in an interaction's `data` payload."""
    for option in (data or {}).get("options", []):
        if option.get("name") == name:
            return option.get("value")
    return None


def get_focused_value(data: Optional[Dict]) -> str:
    """Text of the option the user is currently typing into."""
    for option in (data or {}).get("options", []):
        if option.get("focused"):
            return str(option.get("value") or "")
    return ""


class DiscordAdapter:
    """Discord gateway adapter. Routes events to a WikiBotRunner."""

    def __init__(
        self,
        bot_token: Optional[str] = None,
        application_id: Optional[str] = None,
    ):
        self.bot_token = bot_token or os.environ.get("DISCORD_BOT_TOKEN")
        self.application_id = application_id or os.environ.get("CLIENT_ID")

        if not self.bot_token or not self.application_id:
            raise ValueError("Missing DISCORD_BOT_TOKEN or CLIENT_ID")

        self.runner = None
        self.client: Optional[discord.Client] = None

    def start(self, runner, serve_status: bool = True):
        """Connect to Discord (and serve /status), blocking until shutdown."""
        try:
            asyncio.run(self.run(runner, serve_status=serve_status))
        except KeyboardInterrupt:
            logger.info("Shutdown signal received...")

    async def run(self, runner, serve_status: bool = True):
        self.runner = runner
        self.client = discord.Client(
            intents=discord.Intents(guilds=True, guild_messages=True)
        )
        self._register_handlers()

        tasks = [self.client.start(self.bot_token)]
        if serve_status:
            tasks.append(create_server(runner.config.port).serve())

        async with self.client:
            await asyncio.gather(*tasks)

    def _register_handlers(self):
        """Register Discord event handlers."""

        @self.client.event
        async def on_ready():
            await self._handle_ready()

        @self.client.event
        async def on_guild_join(guild):
            await self._handle_guild_join(guild)

        @self.client.event
        async def on_interaction(interaction):
            await self._handle_interaction(interaction)

    async def _handle_ready(self):
        logger.info(f"Logged in as {self.client.user}!")
        guilds = [(str(guild.id), guild.name) for guild in self.client.guilds]
        for action in self.runner.handle_ready(guilds):
            await self._apply_guild_action(action)

    async def _handle_guild_join(self, guild):
        action = self.runner.handle_guild_join(str(guild.id), guild.name)
        await self._apply_guild_action(action, guild)

    async def _handle_interaction(self, interaction):
        guild_id = str(interaction.guild_id) if interaction.guild_id else None

        if interaction.type == discord.InteractionType.autocomplete:
            action = self.runner.handle_autocomplete(
                guild_id, get_focused_value(interaction.data)
            )
        elif interaction.type == discord.InteractionType.application_command:
            data = interaction.data or {}
            action = self.runner.handle_command(
                guild_id, data.get("name", ""), get_option_value(data, QUERY_OPTION)
            )
        else:
            return

        if action is not None:
            await self._respond(interaction, action)

    async def _respond(self, interaction, action):
        """Send a Reply or Suggest action; failures are logged, not retried."""
        try:
            if isinstance(action, Suggest):
                await interaction.response.autocomplete(
                    [
                        app_commands.Choice(**candidate.to_choice())
                        for candidate in action.candidates
                    ]
                )
            elif isinstance(action, Reply):
                await interaction.response.send_message(
                    action.content, ephemeral=action.ephemeral
                )
        except discord.DiscordException as e:
            logger.error(f"Could not respond to interaction in guild {interaction.guild_id}: {e}")

    async def _apply_guild_action(self, action, guild=None):
        if isinstance(action, Deploy):
            await self.deploy_commands(action.guild_id)
        elif isinstance(action, Leave):
            await self.leave_guild(action, guild)

    async def deploy_commands(self, guild_id: str) -> bool:
        """Overwrite the guild's commands with the /wiki command."""
        schema = wiki_command_schema(self.runner.config.command_description)
        try:
            await self.client.http.bulk_upsert_guild_commands(
                self.application_id, guild_id, [schema]
            )
        except discord.HTTPException as e:
            logger.error(f"Error deploying commands for {guild_id}: {e}")
            return False
        logger.info(f"Commands deployed for {guild_id}")
        return True

    async def leave_guild(self, action: Leave, guild=None) -> bool:
        guild = guild or self.client.get_guild(int(action.guild_id))
        if guild is None:
            logger.warning(f"Guild {action.guild_id} not in cache; cannot leave")
            return False
        try:
            await guild.leave()
        except discord.HTTPException as e:
            logger.error(f"Failed to leave {action.guild_name} ({action.guild_id}): {e}")
            return False
        logger.info(f"Left non-allowlisted guild: {action.guild_name} ({action.guild_id})")
        return True
