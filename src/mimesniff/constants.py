# topmark:header:start
#
#   project      : MimeSniff
#   file         : constants.py
#   file_relpath : src/mimesniff/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

MIMESNIFF_VERSION: str = get_version("mimesniff")

# Maximum number of leading bytes the detector ever examines.
SNIFF_LEN: Final[int] = 512

FALLBACK_MIME: Final[str] = "application/octet-stream"

# Bytes skipped when locating the first non-whitespace byte.
WHITESPACE_BYTES: Final[bytes] = b"\t\n\x0c\r "

# Configuration discovery (CWD)
CONFIG_FILE_NAME: Final[str] = "mimesniff.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "mimesniff"

# Defaults for the payload source
DEFAULT_SOURCE_NAME: Final[str] = "payload"
DEFAULT_FORM_FIELD: Final[str] = "file"
DEFAULT_MAX_MEMORY: Final[int] = 32 * 1024 * 1024
DEFAULT_METHODS: Final[tuple[str, ...]] = ("POST",)

DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[int] = 8088
