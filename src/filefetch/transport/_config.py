"""
Configuration constants for connections.
"""

# Characters returned by a single read()
DEFAULT_CHUNK_SIZE = 8192

# Upper bound accepted for chunk_size
MAX_CHUNK_SIZE = 16 * 1024 * 1024  # 16MiB

# Timeouts for HTTP connections (seconds)
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_REQUEST_TIMEOUT = 30.0

# Text encoding of served files
DEFAULT_ENCODING = "utf-8"

# HTTP statuses meaning "no such file"
MISSING_FILE_STATUSES = frozenset({404, 410})
