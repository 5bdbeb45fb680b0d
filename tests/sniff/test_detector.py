# topmark:header:start
#
#   project      : MimeSniff
#   file         : test_detector.py
#   file_relpath : tests/sniff/test_detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scenario tests for `mimesniff.sniff.detector.detect_content_type`."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from mimesniff.constants import FALLBACK_MIME, SNIFF_LEN
from mimesniff.sniff.detector import (
    detect_content_type,
    detect_file,
    detect_stream,
    first_non_ws_index,
)
from mimesniff.sniff.format import Format
from mimesniff.sniff.signatures import HTML_MIME, TEXT_MIME, ExactSig, TextSig

if TYPE_CHECKING:
    from pathlib import Path

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"", 0),
        (b"abc", 0),
        (b"  \t\nabc", 4),
        (b"\x0c\r x", 3),
        (b" \t\n\x0c\r", 5),
        (b"\x0bx", 0),  # vertical tab is not whitespace
    ],
)
def test_first_non_ws_index(data: bytes, expected: int) -> None:
    assert first_non_ws_index(data) == expected


def test_png_magic_wins_over_embedded_html() -> None:
    """An exact match at offset 0 beats an HTML tag appearing later in the buffer."""
    data = PNG_MAGIC + b"<html><body>hi</body></html>"
    assert detect_content_type(data) == Format("image/png", "png")


@pytest.mark.parametrize("data", [b"<SCRIPT>alert(1)</SCRIPT>", b"<script>", b"<ScRiPt >"])
def test_html_tags_are_case_insensitive(data: bytes) -> None:
    assert detect_content_type(data) == Format(HTML_MIME, "")


def test_html_after_leading_whitespace() -> None:
    assert detect_content_type(b"  \t<HTML>").mime == HTML_MIME


def test_html_tag_requires_space_or_close_bracket() -> None:
    """``<B`` must not claim ``<Bogus``; the buffer ends up as plain text."""
    assert detect_content_type(b"<Bogus thing").mime == TEXT_MIME
    assert detect_content_type(b"<b>bold</b>").mime == HTML_MIME
    assert detect_content_type(b"<br ").mime == HTML_MIME


def test_html_tag_at_end_of_buffer_does_not_match() -> None:
    """A bare tag literal with no following byte is too short for the tag matcher."""
    assert detect_content_type(b"<HTML").mime == TEXT_MIME


def test_html_comment_tag() -> None:
    assert detect_content_type(b"<!-- note -->").mime == HTML_MIME


def test_doctype_non_letter_bytes_are_not_folded() -> None:
    """Only letters fold: ``!`` in ``<!DOCTYPE`` must match literally."""
    assert detect_content_type(b"<!doctype html>").mime == HTML_MIME
    assert detect_content_type(b"<\x01doctype html>").mime == FALLBACK_MIME


def test_png_exact_signature() -> None:
    assert detect_content_type(PNG_MAGIC).mime == "image/png"


@pytest.mark.parametrize("size_bytes", [b"\x00\x00\x00\x00", b"\xff\xff\xff\xff", b"abcd"])
def test_webp_size_bytes_are_masked_out(size_bytes: bytes) -> None:
    data = b"RIFF" + size_bytes + b"WEBPVP8 "
    assert detect_content_type(data) == Format("image/webp", "webp")


def test_wave_masked_signature() -> None:
    assert detect_content_type(b"RIFF\x10\x20\x30\x40WAVEfmt ") == Format("audio/wave", "wav")


def test_control_byte_falls_back_to_octet_stream() -> None:
    assert detect_content_type(b"hello\x01world") == Format(FALLBACK_MIME, "")


def test_printable_ascii_is_plain_text() -> None:
    assert detect_content_type(b"just some words, nothing else.") == Format(TEXT_MIME, "")


@pytest.mark.parametrize("allowed", [b"\t", b"\n", b"\x0c", b"\r", b"\x1b"])
def test_text_allows_non_binary_control_bytes(allowed: bytes) -> None:
    assert detect_content_type(b"abc" + allowed + b"def").mime == TEXT_MIME


def test_empty_input_is_octet_stream() -> None:
    assert detect_content_type(b"") == Format(FALLBACK_MIME, "")


def test_whitespace_only_input_is_plain_text() -> None:
    assert detect_content_type(b" \n\t ").mime == TEXT_MIME


def test_bytes_beyond_sniff_window_are_ignored() -> None:
    """A binary byte after the sniff window cannot turn text into binary."""
    data = b"a" * SNIFF_LEN + b"\x00"
    assert detect_content_type(data).mime == TEXT_MIME
    assert detect_content_type(b"a" * (SNIFF_LEN - 1) + b"\x00").mime == FALLBACK_MIME


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"<?xml version='1.0'?><a/>", Format("text/xml; charset=utf-8", "xml")),
        (b"\n  <?xml version='1.0'?>", Format("text/xml; charset=utf-8", "xml")),
        (b"%PDF-1.7\n", Format("application/pdf", "pdf")),
        (b"%!PS-Adobe-3.0", Format("application/postscript", "postscript")),
        (b"8BPS\x00\x01\x00\x00\x00\x00\x00\x00rest", Format("application/octet-stream", "psd")),
        (b"\xfe\xff\x00h", Format("text/plain; charset=utf-16be", "txt")),
        (b"\xff\xfeh\x00", Format("text/plain; charset=utf-16le", "txt")),
        (b"\xef\xbb\xbfhello", Format("text/plain; charset=utf-8", "txt")),
        (b"GIF87a....", Format("image/gif", "gif")),
        (b"GIF89a....", Format("image/gif", "gif")),
        (b"\xff\xd8\xff\xe0", Format("image/jpeg", "jpeg")),
        (b"BM\x00\x00", Format("image/bmp", "bmp")),
        (b"\x00\x00\x01\x00\x01\x00", Format("image/vnd.microsoft.icon", "ico")),
        (b"OggS\x00\x02", Format("application/ogg", "ogg")),
        (b"\x1a\x45\xdf\xa3\x01", Format("video/webm", "webm")),
        (b"Rar \x1a\x07\x00\x01", Format("application/x-rar-compressed", "rar")),
        (b"PK\x03\x04\x14\x00", Format("application/zip", "zip")),
        (b"\x1f\x8b\x08\x00", Format("application/x-gzip", "gzip")),
    ],
)
def test_table_formats(data: bytes, expected: Format) -> None:
    assert detect_content_type(data) == expected


def test_short_bom_does_not_match() -> None:
    """The 4-byte BOM masks need 4 bytes of input; 0xFE 0xFF alone reads as text."""
    assert detect_content_type(b"\xfe\xff") == Format(TEXT_MIME, "")


def test_accepts_bytearray_and_memoryview() -> None:
    assert detect_content_type(bytearray(PNG_MAGIC)).mime == "image/png"
    assert detect_content_type(memoryview(PNG_MAGIC)).mime == "image/png"


def test_custom_signature_table() -> None:
    table = (ExactSig(b"MAGIC", "application/x-magic", "magic"), TextSig())
    assert detect_content_type(b"MAGIC!", table) == Format("application/x-magic", "magic")
    assert detect_content_type(PNG_MAGIC, table).mime == FALLBACK_MIME


def test_detect_stream_reads_only_sniff_window() -> None:
    fp = io.BytesIO(b"%PDF-" + b"x" * (2 * SNIFF_LEN))
    assert detect_stream(fp).mime == "application/pdf"
    assert fp.tell() == SNIFF_LEN


def test_detect_file(tmp_path: Path) -> None:
    path = tmp_path / "image.bin"
    path.write_bytes(PNG_MAGIC + b"\x00" * 1024)
    assert detect_file(path) == Format("image/png", "png")
    assert detect_file(str(path)).mime == "image/png"


def test_detect_file_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        detect_file(tmp_path / "nope")
