"""
Connection protocol consumed by the retrieval client.

Concrete transports (LocalConnection, HttpConnection) and test doubles
implement these five operations. Any of them may raise TransportError.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ServerConnection(Protocol):
    """Capability set for fetching one file from one server."""

    def connect_to(self, server_id: str) -> bool:
        """Open a link to the server. False means the server refused."""
        ...

    def request_file_contents(self, file_name: str) -> bool:
        """Ask for a file. False means the file is invalid or missing."""
        ...

    def more_bytes(self) -> bool:
        """Return True while chunks remain to be read."""
        ...

    def read(self) -> str | None:
        """Return the next chunk. None is an empty payload."""
        ...

    def close_connection(self) -> None:
        """Release the link opened by connect_to."""
        ...


__all__ = ["ServerConnection"]
