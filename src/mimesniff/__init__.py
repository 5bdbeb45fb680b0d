# topmark:header:start
#
#   project      : MimeSniff
#   file         : __init__.py
#   file_relpath : src/mimesniff/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff package.

MimeSniff classifies an opaque byte buffer (typically an HTTP upload body) into
a MIME type and a short canonical "extra" tag, using only the leading bytes of
the buffer. It exposes a small typed API, a WSGI application and a CLI.
"""

from __future__ import annotations

from mimesniff.sniff.detector import detect_content_type, detect_file, detect_stream
from mimesniff.sniff.format import Format

__all__ = [
    "Format",
    "detect_content_type",
    "detect_file",
    "detect_stream",
]
