# topmark:header:start
#
#   project      : MimeSniff
#   file         : cmd_common.py
#   file_relpath : src/mimesniff/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mimesniff.cli.errors import MimesniffConfigError
from mimesniff.config import ConfigLoadError, load_config
from mimesniff.config.logging import get_logger

if TYPE_CHECKING:
    from mimesniff.cli.console_api import ConsoleLike
    from mimesniff.config import Config
    from mimesniff.config.logging import MimesniffLogger

logger: MimesniffLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console initialized by the command group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Load the effective configuration once per invocation.

    The group's ``--config`` path (if any) is applied on top of the defaults and
    any discovered config file. The result is cached on ``ctx.obj``.

    Raises:
        MimesniffConfigError: If the explicit config file cannot be loaded.
    """
    ctx.ensure_object(dict)
    cached: Config | None = ctx.obj.get("config")
    if cached is not None:
        return cached

    raw_path: str | None = ctx.obj.get("config_path")
    try:
        config: Config = load_config(Path(raw_path) if raw_path else None)
    except ConfigLoadError as e:
        raise MimesniffConfigError(str(e)) from e

    ctx.obj["config"] = config
    return config
