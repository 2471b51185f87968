"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from commands import CommandDispatcher, build_dispatcher
from server_list import ServerRegistry


@pytest.fixture
def registry() -> ServerRegistry:
    """A registry with three known servers."""
    return ServerRegistry(["alpha", "beta", "gamma"])


@pytest.fixture
def dispatcher(registry: ServerRegistry) -> CommandDispatcher:
    """A dispatcher with the bot commands bound to the registry fixture."""
    return build_dispatcher(registry)


@pytest.fixture
def write_servers(tmp_path: Path):
    """Write raw bytes to a servers file and return its path."""

    def _write(content: bytes) -> str:
        path = tmp_path / "servers.txt"
        path.write_bytes(content)
        return str(path)

    return _write
