# topmark:header:start
#
#   project      : MimeSniff
#   file         : dump_config.py
#   file_relpath : src/mimesniff/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff `dump-config` command.

Emits the effective configuration (defaults, then the discovered config file,
then ``--config``) as TOML. The document is wrapped between
``# === BEGIN ===`` and ``# === END ===`` markers for easy parsing by tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mimesniff.cli.cmd_common import get_config, get_console
from mimesniff.config.io import to_toml
from mimesniff.config.logging import get_logger

if TYPE_CHECKING:
    from mimesniff.cli.console_api import ConsoleLike
    from mimesniff.config import Config

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective MimeSniff configuration as TOML.",
)
def dump_config_command() -> None:
    """Print the merged configuration and the files it was built from."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx)

    logger.trace("Effective config for dump: %s", config)

    console.print("# Merged MimeSniff config (TOML)")
    for origin in config.config_files:
        console.print(f"# from: {origin}")
    console.print()
    console.print("# === BEGIN ===")
    console.print(to_toml(config.to_toml_dict()), nl=False)
    console.print("# === END ===")
