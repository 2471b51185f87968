#!/usr/bin/env python3
"""ServerBot - Main entry point."""

import asyncio
import signal
import sys

import discord

from bot import CommandRegistrationError, ServerBot
from commands import build_dispatcher
from config import BotConfig, load_config
from server_list import RegistryLoadError, ServerRegistry


def _load_registry(path: str) -> ServerRegistry:
    """Load the server list, printing how many servers were found."""
    registry = ServerRegistry.load(path)
    print(f"Loaded {len(registry)} servers from {path}")
    return registry


async def _run(bot: ServerBot, token: str) -> None:
    """Run the bot until it stops on its own or a stop signal arrives."""
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop.set)
        except NotImplementedError:
            # Windows event loops; Ctrl-C surfaces as KeyboardInterrupt there.
            pass

    async with bot:
        runner = asyncio.create_task(bot.start(token))
        waiter = asyncio.create_task(stop.wait())
        done, _ = await asyncio.wait({runner, waiter}, return_when=asyncio.FIRST_COMPLETED)
        if runner in done:
            waiter.cancel()
            runner.result()
            return
        await bot.close()
        await runner


def run(config: BotConfig) -> int:
    """Start the bot with the given configuration; returns an exit status."""
    try:
        registry = _load_registry(config.servers_file)
    except RegistryLoadError as exc:
        print(f"read servers: {exc}", file=sys.stderr)
        return 1

    dispatcher = build_dispatcher(registry)
    bot = ServerBot(
        dispatcher,
        guild_id=config.discord.guild_id,
        remove_commands=config.discord.remove_commands,
    )

    try:
        asyncio.run(_run(bot, config.discord.token))
    except KeyboardInterrupt:
        pass
    except CommandRegistrationError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except discord.LoginFailure as exc:
        print(f"error creating Discord session: {exc}", file=sys.stderr)
        return 1
    except discord.DiscordException as exc:
        print(f"error opening connection: {exc}", file=sys.stderr)
        return 1
    return 0


def main():
    """Main application entry point."""
    print("starting")
    discord.utils.setup_logging()

    try:
        config = load_config()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(1)

    status = run(config)
    if status:
        sys.exit(status)
    print("stopped")


if __name__ == "__main__":
    main()
