"""Command system for ServerBot.

Each command is a class that inherits from BaseCommand and implements:
- name: command name as registered with Discord (e.g., "list")
- help_text: brief description
- execute(registry, request): build the reply for one invocation
"""

from .base import (
    BaseCommand,
    CommandDispatcher,
    CommandOption,
    CommandRequest,
    CommandResponse,
    OptionSpec,
)
from .list_servers import ListServersCommand
from .start_server import StartServerCommand
from server_list import ServerRegistry


def build_dispatcher(registry: ServerRegistry) -> CommandDispatcher:
    """Return a dispatcher with every bot command registered."""
    return CommandDispatcher(registry, [ListServersCommand(), StartServerCommand()])


__all__ = [
    "BaseCommand",
    "CommandDispatcher",
    "CommandOption",
    "CommandRequest",
    "CommandResponse",
    "OptionSpec",
    "ListServersCommand",
    "StartServerCommand",
    "build_dispatcher",
]
