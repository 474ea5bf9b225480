"""
Logging for filefetch.

All loggers live under the "filefetch" namespace. Nothing is printed until
setup_logging() installs a handler; library users may configure the
namespace themselves instead.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

ROOT_LOGGER = "filefetch"

_HANDLER_NAME = "filefetch-stream"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the filefetch namespace."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(
    level: str | None = None,
    json_format: bool | None = None,
) -> logging.Logger:
    """
    Install a stderr handler on the filefetch logger.

    Calling it again replaces the previous handler rather than adding one.

    Args:
        level: Log level name. Defaults to settings.log_level.
        json_format: Emit JSON lines. Defaults to settings.log_json.

    Returns:
        The filefetch root logger.
    """
    from filefetch.config import get_settings

    settings = get_settings()
    level = level or settings.log_level
    if json_format is None:
        json_format = settings.log_json

    logger = logging.getLogger(ROOT_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger


__all__ = ["JsonFormatter", "ROOT_LOGGER", "get_logger", "setup_logging"]
