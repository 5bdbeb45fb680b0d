# topmark:header:start
#
#   project      : MimeSniff
#   file         : table.py
#   file_relpath : src/mimesniff/sniff/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered signature table.

Exports:
    SNIFF_SIGNATURES: Every matcher the detector evaluates, highest priority
        first. Order is part of the detection contract: entries must never be
        resorted or deduplicated, since ambiguous inputs resolve to the first
        matching entry.
    describe_signatures: Tabular view of the table for listings.

Notes:
    - Data matches the table in section 6 of the WHATWG MIME Sniffing standard
      (https://mimesniff.spec.whatwg.org/), extended with PSD and a few
      container formats.
    - ICO, RAR, ZIP and GZIP deliberately use a single exact prefix each.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from mimesniff.sniff.signatures import ExactSig, HtmlSig, MaskedSig, SniffSig, TextSig

if TYPE_CHECKING:
    from collections.abc import Iterator

SNIFF_SIGNATURES: Final[tuple[SniffSig, ...]] = (
    HtmlSig(b"<!DOCTYPE HTML"),
    HtmlSig(b"<HTML"),
    HtmlSig(b"<HEAD"),
    HtmlSig(b"<SCRIPT"),
    HtmlSig(b"<IFRAME"),
    HtmlSig(b"<H1"),
    HtmlSig(b"<DIV"),
    HtmlSig(b"<FONT"),
    HtmlSig(b"<TABLE"),
    HtmlSig(b"<A"),
    HtmlSig(b"<STYLE"),
    HtmlSig(b"<TITLE"),
    HtmlSig(b"<B"),
    HtmlSig(b"<BODY"),
    HtmlSig(b"<BR"),
    HtmlSig(b"<P"),
    HtmlSig(b"<!--"),
    MaskedSig(
        mask=b"\xff\xff\xff\xff\xff",
        pat=b"<?xml",
        mime="text/xml; charset=utf-8",
        extra="xml",
        skip_ws=True,
    ),
    # PSD: https://www.adobe.com/devnet-apps/photoshop/fileformatashtml/
    ExactSig(b"8BPS\x00\x01\x00\x00\x00\x00\x00\x00", "application/octet-stream", "psd"),
    ExactSig(b"%PDF-", "application/pdf", "pdf"),
    ExactSig(b"%!PS-Adobe-", "application/postscript", "postscript"),
    # UTF BOMs, padded to 4 mask bytes.
    MaskedSig(
        mask=b"\xff\xff\x00\x00",
        pat=b"\xfe\xff\x00\x00",
        mime="text/plain; charset=utf-16be",
        extra="txt",
    ),
    MaskedSig(
        mask=b"\xff\xff\x00\x00",
        pat=b"\xff\xfe\x00\x00",
        mime="text/plain; charset=utf-16le",
        extra="txt",
    ),
    MaskedSig(
        mask=b"\xff\xff\xff\x00",
        pat=b"\xef\xbb\xbf\x00",
        mime="text/plain; charset=utf-8",
        extra="txt",
    ),
    ExactSig(b"GIF87a", "image/gif", "gif"),
    ExactSig(b"GIF89a", "image/gif", "gif"),
    ExactSig(b"\x89PNG\r\n\x1a\n", "image/png", "png"),
    ExactSig(b"\xff\xd8\xff", "image/jpeg", "jpeg"),
    ExactSig(b"BM", "image/bmp", "bmp"),
    # RIFF container: the 4 size bytes at offset 4 are masked out.
    MaskedSig(
        mask=b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff\xff\xff",
        pat=b"RIFF\x00\x00\x00\x00WEBPVP",
        mime="image/webp",
        extra="webp",
    ),
    ExactSig(b"\x00\x00\x01\x00", "image/vnd.microsoft.icon", "ico"),
    ExactSig(b"OggS\x00", "application/ogg", "ogg"),
    MaskedSig(
        mask=b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff",
        pat=b"RIFF\x00\x00\x00\x00WAVE",
        mime="audio/wave",
        extra="wav",
    ),
    ExactSig(b"\x1a\x45\xdf\xa3", "video/webm", "webm"),
    ExactSig(b"Rar \x1a\x07\x00", "application/x-rar-compressed", "rar"),
    ExactSig(b"PK\x03\x04", "application/zip", "zip"),
    ExactSig(b"\x1f\x8b\x08", "application/x-gzip", "gzip"),
    # Must stay last: near-universal fallback before application/octet-stream.
    TextSig(),
)


class SignatureRow(NamedTuple):
    """One row of the signature listing."""

    priority: int
    kind: str
    pattern: str
    mime: str
    extra: str


def describe_signatures(
    signatures: tuple[SniffSig, ...] = SNIFF_SIGNATURES,
) -> Iterator[SignatureRow]:
    """Yield one `SignatureRow` per matcher, in priority order (1-based)."""
    for idx, sig in enumerate(signatures, start=1):
        pattern, mime, extra = sig.describe()
        yield SignatureRow(priority=idx, kind=sig.kind, pattern=pattern, mime=mime, extra=extra)
