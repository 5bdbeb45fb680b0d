# topmark:header:start
#
#   project      : MimeSniff
#   file         : app.py
#   file_relpath : src/mimesniff/app.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WSGI application exposing content sniffing over HTTP.

Each request is handed to the first enabled payload source that accepts it;
the extracted payload is sniffed and the result is returned as JSON::

    {"mime": "image/png", "extra": "png"}

Errors are reported as JSON objects with ``error`` (a stable slug) and
``message`` keys:

- ``405 method_not_allowed``: no source accepts the request;
- ``400 <code>``: the source failed (see `mimesniff.source.errors`).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from werkzeug.wrappers import Request, Response

from mimesniff.config import Config, MutableConfig
from mimesniff.config.logging import get_logger
from mimesniff.sniff.detector import detect_content_type
from mimesniff.source import SourceError, build_sources, match_source

if TYPE_CHECKING:
    from collections.abc import Iterable

    from _typeshed.wsgi import StartResponse, WSGIEnvironment

    from mimesniff.config.logging import MimesniffLogger
    from mimesniff.sniff.format import Format
    from mimesniff.source import PayloadSource

logger: MimesniffLogger = get_logger(__name__)


def _json_response(payload: dict[str, Any], status: int = 200) -> Response:
    return Response(json.dumps(payload), status=status, mimetype="application/json")


def _json_error(status: int, code: str, message: str) -> Response:
    return _json_response({"error": code, "message": message}, status=status)


class SniffApp:
    """WSGI callable wiring payload sources to the content-type detector.

    Args:
        config (Config): Runtime configuration; selects and configures the sources.

    Raises:
        SourceNotFoundError: If ``config`` enables an unregistered source.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.sources: list[PayloadSource] = build_sources(config)

    def dispatch(self, request: Request) -> Response:
        """Handle one request and return the response to send."""
        source: PayloadSource | None = match_source(self.sources, request)
        if source is None:
            response: Response = _json_error(
                405, "method_not_allowed", f"Method {request.method} is not supported"
            )
            response.headers["Allow"] = ", ".join(self.config.methods)
            return response

        try:
            payload: bytes = source.get_payload(request)
        except SourceError as e:
            logger.info("%s %s: %s (%s)", request.method, request.path, e.code, e)
            return _json_error(400, e.code, str(e))

        fmt: Format = detect_content_type(payload)
        logger.info(
            "%s %s: %d bytes -> %s (%s)",
            request.method,
            request.path,
            len(payload),
            fmt.mime,
            fmt.extra or "-",
        )
        return _json_response(fmt.to_dict())

    def __call__(self, environ: WSGIEnvironment, start_response: StartResponse) -> Iterable[bytes]:
        request = Request(environ)
        response: Response = self.dispatch(request)
        return response(environ, start_response)


def create_app(config: Config | None = None) -> SniffApp:
    """Return the WSGI application (default configuration when ``config`` is None)."""
    return SniffApp(config if config is not None else MutableConfig.from_defaults().freeze())
