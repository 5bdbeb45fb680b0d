# topmark:header:start
#
#   project      : MimeSniff
#   file         : __init__.py
#   file_relpath : src/mimesniff/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff configuration: model, TOML loading and logging setup."""

from __future__ import annotations

from mimesniff.config.io import ConfigLoadError
from mimesniff.config.model import Config, MutableConfig, discover_config_file, load_config

__all__ = [
    "Config",
    "ConfigLoadError",
    "MutableConfig",
    "discover_config_file",
    "load_config",
]
