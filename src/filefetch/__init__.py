"""
filefetch: whole-file retrieval over a pluggable connection.

Example:
    >>> from filefetch import FileRetrievalClient, LocalConnection
    >>> client = FileRetrievalClient(LocalConnection({"docs": "./docs"}))
    >>> result = client.request_file("docs", "readme.txt")
    >>> result.unwrap_or("<failed>")
"""

from filefetch.client import FileRetrievalClient, RetrievalState, fetch_file
from filefetch.config import FetchSettings, configure_settings, get_settings
from filefetch.exceptions import FileFetchError, TransportError
from filefetch.models import Complete, Failed, RetrievalResult
from filefetch.transport import HttpConnection, LocalConnection, ServerConnection

__version__ = "0.1.0"

__all__ = [
    "Complete",
    "Failed",
    "FetchSettings",
    "FileFetchError",
    "FileRetrievalClient",
    "HttpConnection",
    "LocalConnection",
    "RetrievalResult",
    "RetrievalState",
    "ServerConnection",
    "TransportError",
    "configure_settings",
    "fetch_file",
    "get_settings",
]
