# topmark:header:start
#
#   project      : MimeSniff
#   file         : signatures.py
#   file_relpath : src/mimesniff/cli/commands/signatures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff `signatures` command.

Lists the signature table in priority order: the first matching row decides
the detected type.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from mimesniff.cli.cmd_common import get_console
from mimesniff.cli.options import get_effective_verbosity, output_format_option
from mimesniff.cli.utils import OutputFormat, render_markdown_table
from mimesniff.constants import MIMESNIFF_VERSION
from mimesniff.sniff.table import SignatureRow, describe_signatures

if TYPE_CHECKING:
    from mimesniff.cli.console_api import ConsoleLike


@click.command(
    name="signatures",
    help="List the content signatures in priority order.",
    epilog="""
Patterns show printable ASCII as is and other bytes as \\xNN; '?' marks a
masked-out byte and '[ws]' means leading whitespace is skipped before matching.
""",
)
@output_format_option
def signatures_command(*, output_format: OutputFormat | None = None) -> None:
    """List the signature table.

    Args:
        output_format (OutputFormat | None): Output format; ``None`` means default.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    rows: list[SignatureRow] = list(describe_signatures())
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([r._asdict() for r in rows], indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for r in rows:
            console.print(json.dumps(r._asdict()))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# Content Signatures\n\nMimeSniff version **{MIMESNIFF_VERSION}**:\n")
        table = render_markdown_table(
            ["#", "Kind", "Pattern", "MIME type", "Extra"],
            [
                [str(r.priority), r.kind, f"`{r.pattern}`" if r.pattern else "", r.mime, r.extra]
                for r in rows
            ],
            align={0: "right"},
        )
        console.print(table, nl=False)
        return

    vlevel: int = get_effective_verbosity(ctx)
    width: int = len(str(len(rows)))
    for r in rows:
        line = f"{r.priority:>{width}}. {console.styled(r.mime, fg='cyan')}"
        if r.extra:
            line += f" ({r.extra})"
        if vlevel > 0:
            line += f"  [{r.kind}] {r.pattern}"
        console.print(line)
