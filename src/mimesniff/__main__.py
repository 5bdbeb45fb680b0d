# topmark:header:start
#
#   project      : MimeSniff
#   file         : __main__.py
#   file_relpath : src/mimesniff/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running MimeSniff via ``python -m mimesniff``.

Delegates to :func:`mimesniff.cli.main.cli`, equivalent to running the
``mimesniff`` console script.

Examples:
    Sniff an upload saved on disk::

        python -m mimesniff detect upload.bin
"""

from __future__ import annotations

from mimesniff.cli.main import cli

if __name__ == "__main__":
    cli()
