# topmark:header:start
#
#   project      : MimeSniff
#   file         : base.py
#   file_relpath : src/mimesniff/source/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Protocols shared by payload sources.

A *payload source* is a named strategy that decides whether it handles a given
HTTP request (`PayloadSource.matches`) and, if so, extracts the raw bytes to
sniff from it (`PayloadSource.get_payload`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from werkzeug.wrappers import Request

    from mimesniff.config import Config


@runtime_checkable
class PayloadSource(Protocol):
    """Strategy that extracts a byte payload from an HTTP request.

    Attributes:
        name (str): Registry name of the source (e.g. ``"payload"``).
    """

    name: str

    def matches(self, request: Request) -> bool:
        """Return True if this source handles ``request``."""
        ...

    def get_payload(self, request: Request) -> bytes:
        """Extract the payload bytes from ``request``.

        Raises:
            SourceError: If no payload can be extracted (see `mimesniff.source.errors`).
        """
        ...


SourceFactory = Callable[["Config"], PayloadSource]
"""Type of the callables stored in the source registry."""
