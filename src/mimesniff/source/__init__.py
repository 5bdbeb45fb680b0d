# topmark:header:start
#
#   project      : MimeSniff
#   file         : __init__.py
#   file_relpath : src/mimesniff/source/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload sources: strategies that extract the bytes to sniff from an HTTP request.

Importing this package registers the built-in ``payload`` source.
"""

from __future__ import annotations

from mimesniff.source.base import PayloadSource, SourceFactory
from mimesniff.source.body import BodySource
from mimesniff.source.errors import (
    EmptyBodyError,
    FormParseError,
    MissingFileFieldError,
    SourceError,
    SourceNotFoundError,
)
from mimesniff.source.registry import (
    build_sources,
    get_source_registry,
    match_source,
    register_source,
    unregister_source,
)

__all__ = [
    "BodySource",
    "EmptyBodyError",
    "FormParseError",
    "MissingFileFieldError",
    "PayloadSource",
    "SourceError",
    "SourceFactory",
    "SourceNotFoundError",
    "build_sources",
    "get_source_registry",
    "match_source",
    "register_source",
    "unregister_source",
]
