# topmark:header:start
#
#   project      : MimeSniff
#   file         : detect.py
#   file_relpath : src/mimesniff/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff `detect` command.

Sniffs each PATH (``-`` reads the content from STDIN) and reports the detected
MIME type. STDIN is read once even when ``-`` is repeated. Every path is
processed even when some of them fail; the exit code is taken from the first
failure.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, NamedTuple

import click

from mimesniff.cli.cmd_common import get_console
from mimesniff.cli.errors import MimesniffError, MimesniffUsageError, error_for_oserror
from mimesniff.cli.exit_codes import ExitCode
from mimesniff.cli.options import get_effective_verbosity, output_format_option
from mimesniff.cli.utils import OutputFormat, render_markdown_table
from mimesniff.config.logging import get_logger
from mimesniff.sniff.detector import detect_file, detect_stream

if TYPE_CHECKING:
    from mimesniff.cli.console_api import ConsoleLike
    from mimesniff.config.logging import MimesniffLogger
    from mimesniff.sniff.format import Format

logger: MimesniffLogger = get_logger(__name__)

STDIN_LABEL = "<stdin>"


class DetectResult(NamedTuple):
    """Detection outcome for one input path."""

    path: str
    fmt: Format | None
    error: MimesniffError | None

    def to_dict(self) -> dict[str, str]:
        """Serialize for JSON output."""
        if self.fmt is not None:
            return {"path": self.path, **self.fmt.to_dict()}
        return {"path": self.path, "error": self.error.format_message() if self.error else ""}


def _sniff_one(path: str) -> DetectResult:
    if path == "-":
        return DetectResult(STDIN_LABEL, detect_stream(click.get_binary_stream("stdin")), None)
    try:
        fmt: Format = detect_file(path)
    except OSError as e:
        err_cls = error_for_oserror(e)
        logger.debug("detect: %s failed: %s", path, e)
        return DetectResult(path, None, err_cls(f"{path}: {e.strerror or e}"))
    return DetectResult(path, fmt, None)


def _render_default(console: ConsoleLike, results: list[DetectResult], vlevel: int) -> None:
    for r in results:
        if r.fmt is None:
            continue
        label: str = console.styled(r.path, bold=True)
        mime: str = console.styled(r.fmt.mime, fg="cyan")
        if vlevel > 0 and r.fmt.extra:
            console.print(f"{label}: {mime} ({r.fmt.extra})")
        else:
            console.print(f"{label}: {mime}")


@click.command(
    name="detect",
    help="Detect the MIME type of each PATH ('-' reads from STDIN).",
)
@click.argument("paths", nargs=-1, type=str)
@output_format_option
def detect_command(
    *,
    paths: tuple[str, ...],
    output_format: OutputFormat | None = None,
) -> None:
    """Detect the content type of files.

    Args:
        paths (tuple[str, ...]): Files to sniff; ``-`` stands for STDIN.
        output_format (OutputFormat | None): Output format; ``None`` means default.

    Raises:
        MimesniffUsageError: If no path is given.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if not paths:
        raise MimesniffUsageError("No input paths given (use '-' to read from STDIN).")

    results: list[DetectResult] = []
    stdin_result: DetectResult | None = None
    for p in paths:
        if p != "-":
            results.append(_sniff_one(p))
        elif stdin_result is None:
            stdin_result = _sniff_one(p)
            results.append(stdin_result)
        else:
            # STDIN can only be consumed once.
            if vlevel >= 0:
                console.warn("STDIN given more than once; reusing the first result.")
            results.append(stdin_result)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([r.to_dict() for r in results], indent=2))
    elif fmt == OutputFormat.NDJSON:
        for r in results:
            console.print(json.dumps(r.to_dict()))
    elif fmt == OutputFormat.MARKDOWN:
        rows = [
            [f"`{r.path}`", f"`{r.fmt.mime}`", r.fmt.extra]
            for r in results
            if r.fmt is not None
        ]
        console.print(render_markdown_table(["Path", "MIME type", "Extra"], rows), nl=False)
    else:
        _render_default(console, results, vlevel)

    failures: list[MimesniffError] = [r.error for r in results if r.error is not None]
    if vlevel >= 0:
        for err in failures:
            console.error(err.format_message())
    if failures:
        ctx.exit(int(failures[0].exit_code or ExitCode.FAILURE))
