# topmark:header:start
#
#   project      : MimeSniff
#   file         : __init__.py
#   file_relpath : src/mimesniff/sniff/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content sniffing: result type, signature matchers, ordered table and detector."""

from __future__ import annotations

from mimesniff.sniff.detector import (
    detect_content_type,
    detect_file,
    detect_stream,
    first_non_ws_index,
)
from mimesniff.sniff.format import Format
from mimesniff.sniff.signatures import ExactSig, HtmlSig, MaskedSig, SniffSig, TextSig
from mimesniff.sniff.table import SNIFF_SIGNATURES, SignatureRow, describe_signatures

__all__ = [
    "SNIFF_SIGNATURES",
    "ExactSig",
    "Format",
    "HtmlSig",
    "MaskedSig",
    "SignatureRow",
    "SniffSig",
    "TextSig",
    "describe_signatures",
    "detect_content_type",
    "detect_file",
    "detect_stream",
    "first_non_ws_index",
]
