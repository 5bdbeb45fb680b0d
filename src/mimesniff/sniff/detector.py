# topmark:header:start
#
#   project      : MimeSniff
#   file         : detector.py
#   file_relpath : src/mimesniff/sniff/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content-type detection entry points.

Implements the algorithm described at https://mimesniff.spec.whatwg.org/ to
determine the content type of some data. At most the first
`SNIFF_LEN` bytes are considered. Detection always returns a valid
MIME type: if no signature recognizes the data, the result is
``application/octet-stream`` with an empty extra tag.

Detection is pure: the signature table is immutable module state, and each
call only reads its argument, so calls are safe from any number of threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from mimesniff.config.logging import get_logger
from mimesniff.constants import FALLBACK_MIME, SNIFF_LEN, WHITESPACE_BYTES
from mimesniff.sniff.format import Format
from mimesniff.sniff.table import SNIFF_SIGNATURES

if TYPE_CHECKING:
    from os import PathLike

    from mimesniff.config.logging import MimesniffLogger
    from mimesniff.sniff.signatures import SniffSig

logger: MimesniffLogger = get_logger(__name__)


def is_ws(b: int) -> bool:
    """Return True if byte ``b`` is tab, LF, FF, CR or space."""
    return b in WHITESPACE_BYTES


def first_non_ws_index(data: bytes) -> int:
    """Return the index of the first non-whitespace byte (``len(data)`` if none)."""
    idx: int = 0
    n: int = len(data)
    while idx < n and is_ws(data[idx]):
        idx += 1
    return idx


def detect_content_type(
    data: bytes | bytearray | memoryview,
    signatures: tuple[SniffSig, ...] = SNIFF_SIGNATURES,
) -> Format:
    """Determine the content type of ``data``.

    Args:
        data (bytes | bytearray | memoryview): The data to classify; only the first
            `SNIFF_LEN` bytes are examined.
        signatures (tuple[SniffSig, ...]): Ordered matchers to evaluate; defaults
            to the built-in table. The first matcher returning a non-empty MIME
            type wins.

    Returns:
        Format: The detected format, or ``application/octet-stream`` with an
            empty extra tag when nothing matched.
    """
    buf: bytes = bytes(data[:SNIFF_LEN])
    first_non_ws: int = first_non_ws_index(buf)

    for sig in signatures:
        fmt: Format = sig.match(buf, first_non_ws)
        if fmt.mime:
            logger.trace("sniff: %r matched (%d bytes) -> %s", sig, len(buf), fmt.mime)
            return fmt

    logger.trace("sniff: no signature matched (%d bytes) -> fallback", len(buf))
    return Format(FALLBACK_MIME, "")


def detect_stream(fp: BinaryIO) -> Format:
    """Read at most `SNIFF_LEN` bytes from a binary stream and detect their type.

    The stream position is advanced by the bytes read.
    """
    return detect_content_type(fp.read(SNIFF_LEN))


def detect_file(path: str | PathLike[str]) -> Format:
    """Detect the content type of the file at ``path``.

    Only the first `SNIFF_LEN` bytes are read.

    Args:
        path (str | PathLike[str]): File to inspect.

    Returns:
        Format: The detected format.

    Raises:
        OSError: If the file cannot be opened or read (e.g. ``FileNotFoundError``,
            ``PermissionError``, ``IsADirectoryError``).
    """
    with open(path, "rb") as fp:
        fmt: Format = detect_stream(fp)
    logger.debug("%s: %s (%s)", path, fmt.mime, fmt.extra or "-")
    return fmt
