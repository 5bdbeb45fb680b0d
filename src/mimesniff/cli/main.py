# topmark:header:start
#
#   project      : MimeSniff
#   file         : main.py
#   file_relpath : src/mimesniff/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff command-line interface.

Group-level options (verbosity, color, config file) are resolved once and
stored in ``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mimesniff.cli.commands.detect import detect_command
from mimesniff.cli.commands.dump_config import dump_config_command
from mimesniff.cli.commands.serve import serve_command
from mimesniff.cli.commands.signatures import signatures_command
from mimesniff.cli.commands.version import version_command
from mimesniff.cli.console import ClickConsole
from mimesniff.cli.options import (
    common_color_options,
    common_verbose_options,
    config_option,
    resolve_verbosity,
)
from mimesniff.cli.utils import ColorMode, resolve_color_mode
from mimesniff.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from mimesniff.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (str | None): Explicit config file from ``--config``.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_path"] = config_path


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Detect the MIME type of content from its leading bytes.",
)
@common_verbose_options
@common_color_options
@config_option
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: str | None,
) -> None:
    """Entry point for the MimeSniff CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'mimesniff detect [PATHS...]' to sniff files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(detect_command)

cli.add_command(signatures_command)

cli.add_command(serve_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
