"""Server list loading for ServerBot.

The list of known servers lives in a plain text file, one server name per
line. It is read once at startup and never written back.
"""
from typing import Iterator, List, Sequence, Tuple


DEFAULT_SERVERS_FILE = "servers.txt"


class RegistryLoadError(OSError):
    """Raised when the server list file cannot be opened or read."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Cannot read server list {path!r}: {cause}")
        self.path = path
        self.cause = cause


def _split_lines(handle) -> Iterator[str]:
    # Only "\n" terminates a line. One trailing "\r" is dropped from every
    # line, the unterminated last one included.
    for line in handle:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


class ServerRegistry:
    """Read-only, ordered collection of known server names."""

    def __init__(self, servers: Sequence[str] = ()):
        self._servers: Tuple[str, ...] = tuple(servers)

    @classmethod
    def load(cls, path: str = DEFAULT_SERVERS_FILE) -> "ServerRegistry":
        """Load the registry from a line-oriented text file.

        Lines are kept verbatim: no stripping, deduplication or validation.
        A blank line is an empty-string server name. The file must be UTF-8;
        undecodable bytes fail the load rather than becoming odd names.

        Raises:
            RegistryLoadError: if the file cannot be opened or read.
        """
        try:
            with open(path, "r", encoding="utf-8", newline="\n") as handle:
                servers = list(_split_lines(handle))
        except (OSError, UnicodeDecodeError) as exc:
            raise RegistryLoadError(path, exc) from exc
        return cls(servers)

    def contains(self, server: str) -> bool:
        return server in self._servers

    def all(self) -> List[str]:
        """Return every server name in file order."""
        return list(self._servers)

    def __len__(self) -> int:
        return len(self._servers)

    def __repr__(self) -> str:
        return f"ServerRegistry({list(self._servers)!r})"


__all__ = ["ServerRegistry", "RegistryLoadError", "DEFAULT_SERVERS_FILE"]
