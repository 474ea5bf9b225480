"""Local directory connection."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Mapping

from filefetch.exceptions import TransportError
from filefetch.logging import get_logger
from filefetch.transport._config import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING

logger = get_logger(__name__)


class LocalConnection:
    """
    Serve files from local directories, one directory per server id.

    Example:
        >>> conn = LocalConnection({"docs": "/srv/docs"}, chunk_size=4096)
        >>> FileRetrievalClient(conn).request_file("docs", "notes/today.txt")
    """

    def __init__(
        self,
        servers: Mapping[str, str | Path],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._servers = {
            name: Path(root).expanduser() for name, root in servers.items()
        }
        self._chunk_size = chunk_size
        self._encoding = encoding
        self._root: Path | None = None
        self._file: IO[str] | None = None
        self._pending: str | None = None

    @property
    def connected(self) -> bool:
        return self._root is not None

    def connect_to(self, server_id: str) -> bool:
        if self._root is not None:
            raise TransportError("already connected", operation="connect_to")

        root = self._servers.get(server_id)
        if root is None or not root.is_dir():
            logger.debug(f"Unknown server or missing directory: {server_id!r}")
            return False

        self._root = root.resolve()
        return True

    def request_file_contents(self, file_name: str) -> bool:
        if self._root is None:
            raise TransportError("not connected", operation="request_file_contents")
        self._close_file()

        try:
            path = (self._root / file_name).resolve(strict=True)
            if not path.is_relative_to(self._root) or not path.is_file():
                return False
        except (FileNotFoundError, NotADirectoryError, ValueError):
            # Missing, or a name the filesystem cannot represent (embedded NUL).
            return False
        except (OSError, RuntimeError) as e:
            raise TransportError(str(e), operation="request_file_contents", cause=e) from e

        try:
            self._file = open(path, encoding=self._encoding)
        except OSError as e:
            raise TransportError(str(e), operation="request_file_contents", cause=e) from e
        return True

    def more_bytes(self) -> bool:
        if self._file is None:
            raise TransportError("no file requested", operation="more_bytes")
        if self._pending is None:
            self._pending = self._next_chunk()
        return self._pending != ""

    def read(self) -> str | None:
        if self._file is None:
            raise TransportError("no file requested", operation="read")
        chunk = self._pending if self._pending is not None else self._next_chunk()
        self._pending = None
        return chunk or None

    def close_connection(self) -> None:
        if self._root is None:
            raise TransportError("not connected", operation="close_connection")
        self._root = None
        self._close_file()

    def _next_chunk(self) -> str:
        if self._file is None:
            raise TransportError("no file requested", operation="read")
        try:
            return self._file.read(self._chunk_size)
        except (OSError, UnicodeDecodeError) as e:
            raise TransportError(str(e), operation="read", cause=e) from e

    def _close_file(self) -> None:
        self._pending = None
        if self._file is not None:
            file, self._file = self._file, None
            try:
                file.close()
            except OSError as e:
                raise TransportError(str(e), operation="close_connection", cause=e) from e

    def __repr__(self) -> str:
        return f"LocalConnection(servers={sorted(self._servers)})"
