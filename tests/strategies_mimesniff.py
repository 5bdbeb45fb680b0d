# topmark:header:start
#
#   project      : MimeSniff
#   file         : strategies_mimesniff.py
#   file_relpath : tests/strategies_mimesniff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for byte buffers shaped like sniffable content."""

from __future__ import annotations

from hypothesis import strategies as st

from mimesniff.constants import SNIFF_LEN, WHITESPACE_BYTES

# Magic prefixes taken from the signature table.
MAGIC_PREFIXES: tuple[bytes, ...] = (
    b"\x89PNG\r\n\x1a\n",
    b"GIF89a",
    b"%PDF-",
    b"\xff\xd8\xff",
    b"PK\x03\x04",
    b"\x1f\x8b\x08",
    b"<html>",
    b"<?xml",
)


def s_whitespace(max_size: int = 16) -> st.SearchStrategy[bytes]:
    """Runs of the bytes the detector treats as leading whitespace."""
    return st.lists(st.sampled_from(list(WHITESPACE_BYTES)), max_size=max_size).map(bytes)


def s_any_buffer(max_size: int = 2 * SNIFF_LEN) -> st.SearchStrategy[bytes]:
    """Arbitrary buffers, including empty ones and ones longer than the sniff window."""
    return st.binary(min_size=0, max_size=max_size)


def s_printable_text(max_size: int = 200) -> st.SearchStrategy[bytes]:
    """Printable ASCII that cannot start with a tag or a magic prefix."""
    return st.text(
        alphabet=st.characters(min_codepoint=0x30, max_codepoint=0x3B),
        min_size=1,
        max_size=max_size,
    ).map(lambda s: s.encode("ascii"))


def s_magic_buffer() -> st.SearchStrategy[bytes]:
    """A known magic prefix followed by arbitrary bytes."""
    return st.tuples(st.sampled_from(MAGIC_PREFIXES), st.binary(max_size=64)).map(
        lambda t: t[0] + t[1]
    )
