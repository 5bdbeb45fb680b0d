# topmark:header:start
#
#   project      : MimeSniff
#   file         : errors.py
#   file_relpath : src/mimesniff/source/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while extracting a payload from a request.

Each error carries a stable ``code`` slug that the HTTP application reports
to clients. Errors are surfaced to the caller and never retried.
"""

from __future__ import annotations

from typing import ClassVar


class SourceError(Exception):
    """Base class for payload source errors."""

    code: ClassVar[str] = "source_error"


class EmptyBodyError(SourceError):
    """The extracted payload is empty."""

    code: ClassVar[str] = "empty_body"

    def __init__(self, message: str = "Empty or unreadable request body") -> None:
        super().__init__(message)


class MissingFileFieldError(SourceError):
    """The multipart form has no file under the expected field name."""

    code: ClassVar[str] = "missing_file_field"

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Multipart form has no file field named {field_name!r}")
        self.field_name = field_name


class FormParseError(SourceError):
    """The multipart form could not be parsed (malformed or over the memory limit)."""

    code: ClassVar[str] = "form_parse_error"


class SourceNotFoundError(SourceError):
    """No payload source is registered under the requested name."""

    code: ClassVar[str] = "source_not_found"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown payload source: {name}")
        self.name = name
