# topmark:header:start
#
#   project      : MimeSniff
#   file         : signatures.py
#   file_relpath : src/mimesniff/sniff/signatures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Signature matchers used by the content-type detector.

Every matcher implements the `SniffSig` protocol: given the (already truncated)
data and the index of its first non-whitespace byte, it returns a `Format`
whose ``mime`` is empty when the data does not match.

Matchers never raise on malformed input and never index past the end of the
data: each fixed-length comparison checks the available length first.

Variants:
    ExactSig: byte-for-byte prefix at offset 0.
    MaskedSig: ``(data[i] & mask[i]) == pat[i]`` for every mask position,
        optionally after skipping leading whitespace.
    HtmlSig: case-insensitive tag literal after leading whitespace, followed by
        a space or ``>``.
    TextSig: no "binary" C0 control byte after leading whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final, Protocol, runtime_checkable

from mimesniff.sniff.format import NO_MATCH, Format

HTML_MIME: Final[str] = "text/html; charset=utf-8"
TEXT_MIME: Final[str] = "text/plain; charset=utf-8"

# C0 control codes that mark data as binary: 0x00-0x08, 0x0B, 0x0E-0x1A, 0x1C-0x1F.
BINARY_CONTROL_BYTES: Final[frozenset[int]] = frozenset(
    [*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)]
)


def render_pattern(raw: bytes) -> str:
    r"""Render a byte pattern for humans (printable ASCII kept, others as ``\xNN``)."""
    return "".join(chr(b) if 0x20 <= b < 0x7F else f"\\x{b:02X}" for b in raw)


@runtime_checkable
class SniffSig(Protocol):
    """Protocol shared by all signature matchers.

    Attributes:
        kind (str): Short matcher family name (``"exact"``, ``"masked"``,
            ``"html"`` or ``"text"``).
    """

    kind: ClassVar[str]

    def match(self, data: bytes, first_non_ws: int) -> Format:
        """Return the detected format, or an empty-MIME `Format` on mismatch.

        Args:
            data (bytes): Data to inspect (already truncated to the sniff length).
            first_non_ws (int): Index of the first non-whitespace byte in ``data``
                (``len(data)`` when ``data`` is all whitespace).

        Returns:
            Format: The matched format, or `NO_MATCH`.
        """
        ...

    def describe(self) -> tuple[str, str, str]:
        """Return ``(pattern, mime, extra)`` for listings."""
        ...


@dataclass(frozen=True, slots=True)
class ExactSig:
    """Match when the data starts with ``sig`` (offset 0, no case folding)."""

    kind: ClassVar[str] = "exact"

    sig: bytes
    mime: str
    extra: str = ""

    def match(self, data: bytes, first_non_ws: int) -> Format:
        if data.startswith(self.sig):
            return Format(self.mime, self.extra)
        return NO_MATCH

    def describe(self) -> tuple[str, str, str]:
        return render_pattern(self.sig), self.mime, self.extra


@dataclass(frozen=True, slots=True)
class MaskedSig:
    """Match when every masked byte equals the pattern byte.

    Attributes:
        mask (bytes): Bitmask applied to each data byte.
        pat (bytes): Expected value of each masked byte; same length as ``mask``.
        mime (str): MIME type reported on match.
        extra (str): Extra tag reported on match.
        skip_ws (bool): Compare from the first non-whitespace byte instead of offset 0.

    Raises:
        ValueError: If ``mask`` and ``pat`` differ in length.
    """

    kind: ClassVar[str] = "masked"

    mask: bytes
    pat: bytes
    mime: str
    extra: str = ""
    skip_ws: bool = False

    def __post_init__(self) -> None:
        if len(self.mask) != len(self.pat):
            raise ValueError(
                f"Mask and pattern length differ ({len(self.mask)} != {len(self.pat)})"
            )

    def match(self, data: bytes, first_non_ws: int) -> Format:
        if self.skip_ws:
            data = data[first_non_ws:]
        if len(data) < len(self.mask):
            return NO_MATCH
        for i, mask in enumerate(self.mask):
            if data[i] & mask != self.pat[i]:
                return NO_MATCH
        return Format(self.mime, self.extra)

    def describe(self) -> tuple[str, str, str]:
        # Masked-out positions are rendered as '?'
        rendered: str = "".join(
            "?" if m == 0x00 else render_pattern(bytes([p]))
            for m, p in zip(self.mask, self.pat)
        )
        if self.skip_ws:
            rendered = f"[ws]{rendered}"
        return rendered, self.mime, self.extra


@dataclass(frozen=True, slots=True)
class HtmlSig:
    """Match an uppercase HTML tag literal, ASCII case-insensitively.

    The literal must be followed by a space or ``>``. The reported type is
    always ``text/html; charset=utf-8``.
    """

    kind: ClassVar[str] = "html"

    tag: bytes

    def match(self, data: bytes, first_non_ws: int) -> Format:
        data = data[first_non_ws:]
        if len(data) < len(self.tag) + 1:
            return NO_MATCH
        for i, b in enumerate(self.tag):
            db: int = data[i]
            if 0x41 <= b <= 0x5A:  # 'A'..'Z': fold the data byte to uppercase
                db &= 0xDF
            if b != db:
                return NO_MATCH
        # Next byte must be space or right angle bracket.
        if data[len(self.tag)] not in (0x20, 0x3E):
            return NO_MATCH
        return Format(HTML_MIME, "")

    def describe(self) -> tuple[str, str, str]:
        return render_pattern(self.tag), HTML_MIME, ""


@dataclass(frozen=True, slots=True)
class TextSig:
    """Match data without binary C0 control bytes (after leading whitespace).

    An empty buffer never matches, so it falls through to the generic binary type.
    """

    kind: ClassVar[str] = "text"

    def match(self, data: bytes, first_non_ws: int) -> Format:
        if not data:
            return NO_MATCH
        for b in data[first_non_ws:]:
            if b in BINARY_CONTROL_BYTES:
                return NO_MATCH
        return Format(TEXT_MIME, "")

    def describe(self) -> tuple[str, str, str]:
        return "<no binary control bytes>", TEXT_MIME, ""
