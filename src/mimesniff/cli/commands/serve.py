# topmark:header:start
#
#   project      : MimeSniff
#   file         : serve.py
#   file_relpath : src/mimesniff/cli/commands/serve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff `serve` command.

Runs the sniffing WSGI application on Werkzeug's development server.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from werkzeug.serving import run_simple

from mimesniff.app import create_app
from mimesniff.cli.cmd_common import get_config, get_console
from mimesniff.cli.errors import MimesniffConfigError
from mimesniff.constants import DEFAULT_HOST, DEFAULT_PORT
from mimesniff.source import SourceNotFoundError

if TYPE_CHECKING:
    from mimesniff.app import SniffApp
    from mimesniff.cli.console_api import ConsoleLike
    from mimesniff.config import Config


@click.command(
    name="serve",
    help="Serve content sniffing over HTTP.",
)
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Interface to bind.")
@click.option(
    "--port",
    type=click.IntRange(0, 65535),
    default=DEFAULT_PORT,
    show_default=True,
    help="Port to listen on.",
)
def serve_command(*, host: str, port: int) -> None:
    """Build the WSGI app from the effective configuration and serve it.

    Raises:
        MimesniffConfigError: If the configuration cannot be loaded or enables
            an unknown payload source.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx)

    try:
        app: SniffApp = create_app(config)
    except SourceNotFoundError as e:
        raise MimesniffConfigError(str(e)) from e

    console.print(
        f"Serving on {console.styled(f'http://{host}:{port}/', bold=True)} "
        f"(sources: {', '.join(config.sources)}; methods: {', '.join(config.methods)})"
    )
    run_simple(host, port, app)
