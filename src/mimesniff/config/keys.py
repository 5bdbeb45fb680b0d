# topmark:header:start
#
#   project      : MimeSniff
#   file         : keys.py
#   file_relpath : src/mimesniff/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for MimeSniff configuration.

These constants define the external configuration schema as it appears in
``mimesniff.toml`` and in ``[tool.mimesniff]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by MimeSniff configuration."""

    # [tool] (pyproject.toml only)
    SECTION_TOOL: Final[str] = "tool"

    # [source]
    SECTION_SOURCE: Final[str] = "source"

    KEY_ENABLED: Final[str] = "enabled"
    KEY_METHODS: Final[str] = "methods"
    KEY_FORM_FIELD: Final[str] = "form_field"
    KEY_MAX_MEMORY: Final[str] = "max_memory"
