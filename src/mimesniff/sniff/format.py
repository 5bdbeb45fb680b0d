# topmark:header:start
#
#   project      : MimeSniff
#   file         : format.py
#   file_relpath : src/mimesniff/sniff/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection result type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Format:
    """Outcome of a single signature match or of a full detection.

    Attributes:
        mime (str): Registered MIME type (e.g. ``"image/png"``), or ``""`` when a
            matcher did not recognize the data.
        extra (str): Short canonical tag (e.g. ``"png"``); may be empty even when
            ``mime`` is set.
    """

    mime: str = ""
    extra: str = ""

    def __bool__(self) -> bool:
        return self.mime != ""

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping of this format."""
        return {"mime": self.mime, "extra": self.extra}


NO_MATCH: Format = Format()
