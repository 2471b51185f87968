"""Discord client that routes slash commands to the command dispatcher."""

import sys
from typing import Any, Dict, List, Mapping

import discord

from commands import CommandDispatcher, CommandOption, CommandRequest


class CommandRegistrationError(RuntimeError):
    """A slash command could not be registered with Discord."""

    def __init__(self, name: str, cause: Exception):
        super().__init__(f"Cannot create '{name}' command: {cause}")
        self.name = name
        self.cause = cause


def request_from_interaction_data(data: Mapping[str, Any]) -> CommandRequest:
    """Build a CommandRequest from a raw application command payload.

    Every string option is kept, in the order Discord sent them.
    """
    options: List[CommandOption] = []
    for raw in data.get("options") or []:
        if raw.get("type") != discord.AppCommandOptionType.string.value:
            continue
        options.append(CommandOption(name=raw.get("name", ""), value=raw.get("value", "")))
    return CommandRequest(name=data.get("name", ""), options=tuple(options))


class ServerBot(discord.Client):
    """Gateway client for the server bot.

    Commands are registered against a single guild on login and, when
    `remove_commands` is set, deleted again on shutdown.
    """

    def __init__(self, dispatcher: CommandDispatcher, guild_id: int, remove_commands: bool = False):
        super().__init__(intents=discord.Intents.default())
        self.dispatcher = dispatcher
        self.guild_id = guild_id
        self.remove_commands = remove_commands
        self.registered_command_ids: List[int] = []

    async def setup_hook(self) -> None:
        print("Adding commands...")
        for payload in self.dispatcher.payloads():
            try:
                created: Dict[str, Any] = await self.http.upsert_guild_command(
                    self.application_id, self.guild_id, payload
                )
            except discord.HTTPException as exc:
                raise CommandRegistrationError(payload["name"], exc) from exc
            self.registered_command_ids.append(int(created["id"]))
        print("Bot is now running.  Press CTRL-C to exit.")

    async def on_ready(self) -> None:
        print(f"Logged in as: {self.user}")

    async def on_interaction(self, interaction: discord.Interaction) -> None:
        if interaction.type is not discord.InteractionType.application_command:
            return

        request = request_from_interaction_data(interaction.data or {})
        response = self.dispatcher.dispatch(request)
        if response is None:
            return

        try:
            await interaction.response.send_message(response.content)
        except discord.HTTPException as exc:
            print(f"Failed to reply to /{request.name}: {exc}", file=sys.stderr)

    async def remove_registered_commands(self) -> None:
        """Delete every command this client registered."""
        while self.registered_command_ids:
            command_id = self.registered_command_ids.pop()
            try:
                await self.http.delete_guild_command(self.application_id, self.guild_id, command_id)
            except discord.HTTPException as exc:
                print(f"Cannot delete command {command_id}: {exc}", file=sys.stderr)

    async def close(self) -> None:
        if self.remove_commands and self.registered_command_ids:
            print("Removing commands...")
            await self.remove_registered_commands()
        await super().close()
