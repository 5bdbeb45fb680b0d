# topmark:header:start
#
#   project      : MimeSniff
#   file         : options.py
#   file_relpath : src/mimesniff/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options (verbosity, color, config file, output format)."""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from mimesniff.cli.cli_types import EnumChoiceParam
from mimesniff.cli.errors import MimesniffUsageError
from mimesniff.cli.utils import ColorMode, OutputFormat

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``verbose_count`` when verbose, ``-1`` when quiet, ``0`` otherwise.

    Raises:
        MimesniffUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MimesniffUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    if quiet_count > 0:
        return -1
    return 0


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (0 if unset)."""
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and the ``--no-color`` shorthand."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config PATH`` selecting an explicit configuration file."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Configuration file (default: discover mimesniff.toml or pyproject.toml).",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` selecting an `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
