# topmark:header:start
#
#   project      : MimeSniff
#   file         : errors.py
#   file_relpath : src/mimesniff/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the MimeSniff CLI.

Raise these in CLI commands to abort with a standardized message and exit code.
They prefer the project console if one is stored in the Click context (see
`MimesniffError.show`) and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from mimesniff.cli.exit_codes import ExitCode


class MimesniffError(click.ClickException):
    """Base class for all MimeSniff CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class MimesniffUsageError(MimesniffError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MimesniffConfigError(MimesniffError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class MimesniffFileNotFoundError(MimesniffError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MimesniffPermissionDeniedError(MimesniffError):
    """Error for insufficient read permissions."""

    exit_code = ExitCode.PERMISSION_DENIED


class MimesniffIOError(MimesniffError):
    """Error for I/O errors while reading input."""

    exit_code = ExitCode.IO_ERROR


def error_for_oserror(exc: OSError) -> type[MimesniffError]:
    """Map an ``OSError`` raised while reading input to a CLI error class."""
    if isinstance(exc, (FileNotFoundError, IsADirectoryError)):
        return MimesniffFileNotFoundError
    if isinstance(exc, PermissionError):
        return MimesniffPermissionDeniedError
    return MimesniffIOError
