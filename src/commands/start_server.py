"""start command - Validate requested servers against the known list.

No server is actually started. Every option value is checked in order and
the first unknown name ends processing; the names accepted before it are
dropped and only the rejection is reported.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from commands.base import BaseCommand, CommandRequest, CommandResponse, OptionSpec
from server_list import ServerRegistry

STARTED_PREFIX = "Started Server: "


@dataclass(frozen=True)
class Accepted:
    servers: Tuple[str, ...]

    def render(self) -> str:
        return STARTED_PREFIX + "".join("\n" + server for server in self.servers)


@dataclass(frozen=True)
class Rejected:
    server: str

    def render(self) -> str:
        return f"{self.server} does not exist."


StartResult = Union[Accepted, Rejected]


def validate_servers(registry: ServerRegistry, requested: Iterable[str]) -> StartResult:
    """Check each requested name in order, stopping at the first unknown one."""
    accepted: List[str] = []
    for server in requested:
        if not registry.contains(server):
            return Rejected(server)
        accepted.append(server)
    return Accepted(tuple(accepted))


class StartServerCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "start"

    @property
    def help_text(self) -> str:
        return "Start one of the known servers"

    @property
    def options(self) -> List[OptionSpec]:
        return [OptionSpec("server", "Name of the server to start", required=True)]

    def execute(self, registry: ServerRegistry, request: CommandRequest) -> CommandResponse:
        result = validate_servers(registry, request.values())
        return CommandResponse(result.render())
