"""
Pytest configuration and fixtures for filefetch tests.
"""

import logging
from unittest.mock import MagicMock

import pytest

from filefetch.client import FileRetrievalClient
from filefetch.logging import ROOT_LOGGER
from filefetch.transport.base import ServerConnection


@pytest.fixture
def connection() -> MagicMock:
    """Provide a connection double restricted to the ServerConnection API."""
    return MagicMock(spec=ServerConnection)


@pytest.fixture
def client(connection) -> FileRetrievalClient:
    """Provide a client wired to the connection double."""
    return FileRetrievalClient(connection)


@pytest.fixture
def accepting_connection(connection) -> MagicMock:
    """Connection that connects and accepts the requested file."""
    connection.connect_to.return_value = True
    connection.request_file_contents.return_value = True
    return connection


# ============================================================================
# Settings / Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_state():
    """Reset settings and filefetch log handlers around every test."""
    from filefetch.config import reset_settings

    logger = logging.getLogger(ROOT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level

    reset_settings()
    yield
    reset_settings()

    logger.handlers[:] = handlers
    logger.setLevel(level)


# ============================================================================
# Test Data Fixtures
# ============================================================================


@pytest.fixture
def docs_root(tmp_path):
    """Directory with a few text files, served as "docs"."""
    root = tmp_path / "docs"
    (root / "notes").mkdir(parents=True)
    (root / "readme.txt").write_text("reading\na\nsplit\nfile\n", encoding="utf-8")
    (root / "empty.txt").write_text("", encoding="utf-8")
    (root / "override.txt").write_text("override file read", encoding="utf-8")
    (root / "notes" / "today.txt").write_text("héllo wörld", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("outside root", encoding="utf-8")
    return root
