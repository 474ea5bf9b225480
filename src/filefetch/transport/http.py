"""
HTTP connection backed by httpx.

A server id maps to a base URL; the requested file is streamed with
GET <base_url>/<file_name> and handed out as text chunks.
"""

from __future__ import annotations

from typing import Iterator, Mapping
from urllib.parse import quote

import httpx

from filefetch.exceptions import TransportError
from filefetch.logging import get_logger
from filefetch.transport._config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_REQUEST_TIMEOUT,
    MISSING_FILE_STATUSES,
)

logger = get_logger(__name__)


class HttpConnection:
    """
    Fetch files from HTTP servers.

    Args:
        servers: Server id to base URL. Ids not listed are used as URLs.
        chunk_size: Characters per read().
        connect_timeout: Connect timeout (seconds).
        request_timeout: Read/write timeout (seconds).
        transport: Custom httpx transport (e.g. httpx.MockTransport).
    """

    def __init__(
        self,
        servers: Mapping[str, str] | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._servers = dict(servers or {})
        self._chunk_size = chunk_size
        self._timeout = httpx.Timeout(request_timeout, connect=connect_timeout)
        self._transport = transport
        self._client: httpx.Client | None = None
        self._response: httpx.Response | None = None
        self._chunks: Iterator[str] | None = None
        self._pending: str | None = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    def connect_to(self, server_id: str) -> bool:
        if self._client is not None:
            raise TransportError("already connected", operation="connect_to")

        base_url = self._servers.get(server_id, server_id)
        client = httpx.Client(
            base_url=base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        try:
            response = client.head("/")
        except httpx.HTTPError as e:
            client.close()
            raise TransportError(str(e), operation="connect_to", cause=e) from e

        if response.is_server_error:
            logger.debug(f"{base_url} refused connection: HTTP {response.status_code}")
            client.close()
            return False

        self._client = client
        return True

    def request_file_contents(self, file_name: str) -> bool:
        if self._client is None:
            raise TransportError("not connected", operation="request_file_contents")
        self._close_response()

        try:
            request = self._client.build_request("GET", "/" + quote(file_name.lstrip("/")))
            response = self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(str(e), operation="request_file_contents", cause=e) from e

        if response.status_code in MISSING_FILE_STATUSES:
            response.close()
            return False
        if not response.is_success:
            response.close()
            raise TransportError(
                f"HTTP {response.status_code}", operation="request_file_contents"
            )

        self._response = response
        self._chunks = response.iter_text(self._chunk_size)
        return True

    def more_bytes(self) -> bool:
        if self._chunks is None:
            raise TransportError("no file requested", operation="more_bytes")
        if self._pending is None:
            self._pending = self._next_chunk("more_bytes")
        return self._pending != ""

    def read(self) -> str | None:
        if self._chunks is None:
            raise TransportError("no file requested", operation="read")
        chunk = self._pending if self._pending is not None else self._next_chunk("read")
        self._pending = None
        return chunk or None

    def close_connection(self) -> None:
        if self._client is None:
            raise TransportError("not connected", operation="close_connection")
        client, self._client = self._client, None
        try:
            self._close_response()
        except httpx.HTTPError as e:
            raise TransportError(str(e), operation="close_connection", cause=e) from e
        finally:
            client.close()

    def _next_chunk(self, operation: str) -> str:
        if self._chunks is None:
            raise TransportError("no file requested", operation=operation)
        try:
            return next(self._chunks, "")
        except httpx.HTTPError as e:
            raise TransportError(str(e), operation=operation, cause=e) from e

    def _close_response(self) -> None:
        self._chunks = None
        self._pending = None
        if self._response is not None:
            response, self._response = self._response, None
            response.close()

    def __repr__(self) -> str:
        return f"HttpConnection(servers={sorted(self._servers)})"
