"""Base command class, request/response types and the dispatcher."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

import discord

from server_list import ServerRegistry


@dataclass(frozen=True)
class CommandOption:
    """One typed option of an inbound command."""

    name: str
    value: str


@dataclass(frozen=True)
class CommandRequest:
    """An inbound command invocation: name plus ordered options."""

    name: str
    options: Tuple[CommandOption, ...] = field(default_factory=tuple)

    def values(self) -> List[str]:
        return [opt.value for opt in self.options]


@dataclass(frozen=True)
class CommandResponse:
    """The single textual reply to a request."""

    content: str


@dataclass(frozen=True)
class OptionSpec:
    """Registration metadata for a command option."""

    name: str
    description: str
    required: bool = False
    type: discord.AppCommandOptionType = discord.AppCommandOptionType.string

    def to_payload(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "name": self.name,
            "description": self.description,
            "required": self.required,
        }


class BaseCommand(ABC):
    """Base class for all commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name as registered with Discord (e.g. 'list')."""
        pass

    @property
    @abstractmethod
    def help_text(self) -> str:
        """Description shown in the Discord command picker."""
        pass

    @property
    def options(self) -> List[OptionSpec]:
        """Options declared at registration time."""
        return []

    @abstractmethod
    def execute(self, registry: ServerRegistry, request: CommandRequest) -> CommandResponse:
        """Execute the command.

        Args:
            registry: Known servers, loaded once at startup
            request: The inbound command with its options
        """
        pass

    def to_payload(self) -> Dict[str, Any]:
        """Return the application command JSON used for registration."""
        payload: Dict[str, Any] = {"name": self.name, "description": self.help_text}
        if self.options:
            payload["options"] = [opt.to_payload() for opt in self.options]
        return payload


class CommandDispatcher:
    """Maps command names to commands and runs them against the registry."""

    def __init__(self, registry: ServerRegistry, commands: Iterable[BaseCommand] = ()):
        self._registry = registry
        self._commands: Dict[str, BaseCommand] = {}
        for command in commands:
            self.register(command)

    def register(self, command: BaseCommand) -> None:
        """Register a command."""
        self._commands[command.name] = command

    def get(self, name: str) -> Optional[BaseCommand]:
        """Get a command by name."""
        return self._commands.get(name)

    def payloads(self) -> List[Dict[str, Any]]:
        """Registration payloads for every command, in registration order."""
        return [command.to_payload() for command in self._commands.values()]

    def dispatch(self, request: CommandRequest) -> Optional[CommandResponse]:
        """Run the command named by the request.

        Returns None for unknown command names; no reply should be sent.
        """
        command = self.get(request.name)
        if command is None:
            return None
        return command.execute(self._registry, request)
