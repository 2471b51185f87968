"""list command - Enumerate the known servers."""

from commands.base import BaseCommand, CommandRequest, CommandResponse
from server_list import ServerRegistry

HEADER = "Servers:"
# Bare carriage return between entries, as the bot has always rendered it.
SEPARATOR = "\r"


def render_server_list(servers) -> str:
    return HEADER + "".join(SEPARATOR + server for server in servers)


class ListServersCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "list"

    @property
    def help_text(self) -> str:
        return "List servers and status"

    def execute(self, registry: ServerRegistry, request: CommandRequest) -> CommandResponse:
        return CommandResponse(render_server_list(registry.all()))
