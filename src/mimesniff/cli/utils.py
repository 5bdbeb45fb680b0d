# topmark:header:start
#
#   project      : MimeSniff
#   file         : utils.py
#   file_relpath : src/mimesniff/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI utility helpers: output formats, color resolution and Markdown tables."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Mapping, Sequence


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON array of objects (machine-readable).
      NDJSON: One JSON object per line (machine-readable).
      MARKDOWN: A GitHub-flavoured Markdown table.

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. **Machine formats**: ``"json"`` or ``"ndjson"`` output is never colored.
      2. **CLI override**: ``ALWAYS`` enables color and ``NEVER`` disables it.
      3. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) enables color;
         ``NO_COLOR`` (set to any value) disables it.
      4. **Auto**: fall back to ``stdout.isatty()``.

    Args:
      cli_mode: Parsed `ColorMode` from ``--color``; ``None`` means "not provided".
      output_format: Output format name, if known.
      stdout_isatty: Optional override for TTY detection.

    Returns:
      True if ANSI color should be enabled; False otherwise.

    Examples:
      >>> resolve_color_mode(cli_mode=ColorMode.NEVER, output_format=None)
      False
      >>> resolve_color_mode(cli_mode=None, output_format="ndjson")
      False
      >>> resolve_color_mode(cli_mode=None, output_format=None, stdout_isatty=True)
      True
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False

    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
      headers: Column headers.
      rows: Row sequences, each the same length as ``headers``.
      align: Optional mapping of column index to ``"left"`` (default),
        ``"right"`` or ``"center"``.

    Returns:
      The Markdown table as a single string ending with a newline.

    Raises:
      ValueError: If a row does not have as many cells as there are headers.
    """
    if not headers:
        return ""
    ncols = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _sep_for(i: int) -> str:
        style = (align or {}).get(i, "left").lower()
        w = max(1, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":" if w > 1 else ":"
        if style == "center":
            return ":" + ("-" * (w - 2) if w > 2 else "-") + ":"
        return "-" * w

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(cells[i]):<{widths[i]}}" for i in range(ncols)) + " |"

    lines = [_line(headers), "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"
