# topmark:header:start
#
#   project      : MimeSniff
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking MimeSniff through Click's `CliRunner`.

`run_cli_in()` changes the working directory to a temporary directory before
invoking the CLI, so config discovery and relative paths resolve there.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from mimesniff.cli.exit_codes import ExitCode
from mimesniff.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_data (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_data=input_data)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for commands that touch no relative paths (``--help``,
    ``version``) or when every path argument is absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_data)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
