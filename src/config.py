"""Configuration helpers for ServerBot.

Settings come from the environment, optionally seeded from a `.env` file by
python-dotenv (see `load_config`).

Current variables:
- DISCORD_TOKEN: bot token (required)
- GUILD_ID: guild the slash commands are registered against (required)
- REMOVE_COMMANDS: when truthy, registered commands are deleted on shutdown
- SERVERS_FILE: path of the server list, defaults to servers.txt
- VAULT_HOST, USERNAME, PASSWORD, NODE, VM_ID: virtualization endpoint
  credentials. They are loaded but nothing uses them yet.
"""
from dataclasses import dataclass, field
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from server_list import DEFAULT_SERVERS_FILE


ENV_TOKEN_NAME = "DISCORD_TOKEN"
ENV_GUILD_NAME = "GUILD_ID"
ENV_REMOVE_COMMANDS_NAME = "REMOVE_COMMANDS"
ENV_SERVERS_FILE_NAME = "SERVERS_FILE"

_TRUTHY = {"1", "true", "yes", "on"}


def _optional_env(name: str) -> Optional[str]:
    """Return the variable, treating an empty value as unset."""
    return os.getenv(name) or None


def _require_env(name: str) -> str:
    val = _optional_env(name)
    if val is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return val


def _int_env(name: str) -> int:
    raw = _require_env(name).strip()
    if not raw.isdigit():
        raise ValueError(f"Environment variable {name} must be an integer; got: {raw}")
    return int(raw)


def _flag_env(name: str) -> bool:
    return (_optional_env(name) or "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class DiscordConfig:
    token: str = field(repr=False)
    guild_id: int
    remove_commands: bool = False


@dataclass(frozen=True)
class ProxmoxConfig:
    """Credentials for the virtualization endpoint."""

    hostname: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    node: Optional[str] = None
    vm_id: Optional[str] = None


@dataclass(frozen=True)
class BotConfig:
    discord: DiscordConfig
    proxmox: ProxmoxConfig
    servers_file: str = DEFAULT_SERVERS_FILE


def load_config(dotenv: bool = True) -> BotConfig:
    """Build the bot configuration from the environment.

    Args:
        dotenv: Load a `.env` file found from the working directory first.
            Values already set in the environment win.

    Raises:
        ValueError: if a required variable is missing or malformed.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    discord = DiscordConfig(
        token=_require_env(ENV_TOKEN_NAME),
        guild_id=_int_env(ENV_GUILD_NAME),
        remove_commands=_flag_env(ENV_REMOVE_COMMANDS_NAME),
    )
    proxmox = ProxmoxConfig(
        hostname=_optional_env("VAULT_HOST"),
        username=_optional_env("USERNAME"),
        password=_optional_env("PASSWORD"),
        node=_optional_env("NODE"),
        vm_id=_optional_env("VM_ID"),
    )
    servers_file = _optional_env(ENV_SERVERS_FILE_NAME) or DEFAULT_SERVERS_FILE
    return BotConfig(discord=discord, proxmox=proxmox, servers_file=servers_file)


__all__ = [
    "BotConfig",
    "DiscordConfig",
    "ProxmoxConfig",
    "load_config",
    "ENV_TOKEN_NAME",
    "ENV_GUILD_NAME",
    "ENV_REMOVE_COMMANDS_NAME",
    "ENV_SERVERS_FILE_NAME",
]
