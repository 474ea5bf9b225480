"""
File retrieval client.

Drives a ServerConnection through connect, request, read and close, and
turns the outcome into a RetrievalResult. Either the whole file comes back
or the call fails; chunks already read are dropped on failure.

Example:
    >>> from filefetch import FileRetrievalClient, LocalConnection
    >>> client = FileRetrievalClient(LocalConnection({"docs": "/srv/docs"}))
    >>> result = client.request_file("docs", "readme.txt")
    >>> if result.ok:
    ...     print(result.content)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from filefetch.exceptions import TransportError
from filefetch.logging import get_logger
from filefetch.models.result import Complete, Failed, RetrievalResult

if TYPE_CHECKING:
    from filefetch.transport.base import ServerConnection

logger = get_logger(__name__)


class RetrievalState(str, Enum):
    """Where the client is in a request_file call."""

    START = "start"
    CONNECTED = "connected"
    VALIDATED = "validated"
    READING = "reading"
    DONE = "done"
    FAILED = "failed"


class FileRetrievalClient:
    """
    Fetch whole files through an injected connection.

    The client never constructs the connection; it only closes what it
    opened. Once connect_to() succeeds, close_connection() is called exactly
    once per request_file() call, on every path.

    Args:
        connection: Any object implementing ServerConnection.
    """

    def __init__(self, connection: ServerConnection) -> None:
        self._connection = connection
        self._state = RetrievalState.START

    @property
    def state(self) -> RetrievalState:
        """Last state reached by the most recent request_file() call."""
        return self._state

    def request_file(self, server_id: str, file_name: str) -> RetrievalResult:
        """
        Retrieve a file's full contents.

        Args:
            server_id: Server to connect to.
            file_name: File to request from it.

        Returns:
            Complete with the concatenated chunks, Complete("") if the server
            has no such file, or Failed on any transport error (including a
            failed close).
        """
        self._state = RetrievalState.START
        conn = self._connection

        try:
            connected = conn.connect_to(server_id)
        except TransportError:
            return self._fail()
        if not connected:
            logger.debug(f"Server {server_id!r} refused connection")
            return self._fail()

        self._state = RetrievalState.CONNECTED
        logger.debug(f"Connected to {server_id!r}")

        try:
            content = self._retrieve(file_name)
        except TransportError:
            self._close_quietly()
            return self._fail()
        except Exception:
            self._close_quietly()
            raise

        try:
            conn.close_connection()
        except TransportError:
            return self._fail()

        logger.debug(f"Closed connection to {server_id!r}")
        self._state = RetrievalState.DONE
        return Complete(content=content)

    def _retrieve(self, file_name: str) -> str:
        """Negotiate and read the file. Raises TransportError on failure."""
        conn = self._connection

        if not conn.request_file_contents(file_name):
            logger.debug(f"No valid file {file_name!r} on server")
            return ""

        self._state = RetrievalState.VALIDATED
        logger.debug(f"Server accepted {file_name!r}")

        self._state = RetrievalState.READING

        chunks: list[str] = []
        while conn.more_bytes():
            chunk = conn.read()
            if chunk:
                chunks.append(chunk)

        logger.debug(f"Read {len(chunks)} chunk(s) of {file_name!r}")
        return "".join(chunks)

    def _close_quietly(self) -> None:
        # Already failing; a close error cannot change the outcome.
        try:
            self._connection.close_connection()
        except TransportError:
            pass

    def _fail(self) -> Failed:
        self._state = RetrievalState.FAILED
        return Failed()


def fetch_file(connection: ServerConnection, server_id: str, file_name: str) -> RetrievalResult:
    """Retrieve one file with a throwaway client."""
    return FileRetrievalClient(connection).request_file(server_id, file_name)


__all__ = ["FileRetrievalClient", "RetrievalState", "fetch_file"]
