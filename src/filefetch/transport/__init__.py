"""
Connections for filefetch.

ServerConnection is the protocol the retrieval client consumes.
LocalConnection and HttpConnection are ready-made implementations.
"""

from filefetch.transport.base import ServerConnection
from filefetch.transport.http import HttpConnection
from filefetch.transport.local import LocalConnection

__all__ = ["HttpConnection", "LocalConnection", "ServerConnection"]
