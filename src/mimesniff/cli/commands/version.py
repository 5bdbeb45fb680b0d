# topmark:header:start
#
#   project      : MimeSniff
#   file         : version.py
#   file_relpath : src/mimesniff/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff `version` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from mimesniff.cli.cmd_common import get_console
from mimesniff.cli.options import get_effective_verbosity, output_format_option
from mimesniff.cli.utils import OutputFormat
from mimesniff.constants import MIMESNIFF_VERSION

if TYPE_CHECKING:
    from mimesniff.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of MimeSniff.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Print the MimeSniff version installed in the active environment."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": MIMESNIFF_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# MimeSniff Version\n")
        console.print(f"**MimeSniff version: {MIMESNIFF_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("MimeSniff version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(MIMESNIFF_VERSION, bold=True)}")
    else:
        console.print(console.styled(MIMESNIFF_VERSION, bold=True))
