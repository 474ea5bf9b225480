"""
Exceptions for filefetch.

Only TransportError is acted on by the retrieval client. A server that
answers "no such file" is not an error and never raises.
"""

from __future__ import annotations


class FileFetchError(Exception):
    """Base exception for filefetch."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self._original_cause = cause

    def __str__(self) -> str:
        return self.message


class TransportError(FileFetchError):
    """
    Failure signalled by a connection operation.

    Raised by any ServerConnection method, independent of cause.

    Attributes:
        operation: Name of the failing operation (e.g. "read"), if known.
    """

    def __init__(
        self,
        message: str = "Transport failure",
        operation: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.operation = operation
        if operation:
            message = f"{operation}: {message}"
        super().__init__(message, cause=cause)


__all__ = ["FileFetchError", "TransportError"]
