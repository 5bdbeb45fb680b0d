# topmark:header:start
#
#   project      : MimeSniff
#   file         : body.py
#   file_relpath : src/mimesniff/source/body.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Request-body payload source.

The ``payload`` source handles requests whose method is enabled in the
configuration (``POST`` by default) and extracts the payload either from a
multipart form file field or from the raw request body:

- ``multipart/*`` requests: the form is parsed with an in-memory limit of
  ``Config.max_memory`` bytes and the file under ``Config.form_field`` is read
  in full;
- any other request: the raw body stream is read in full.

An empty result on either path raises `EmptyBodyError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from werkzeug.exceptions import HTTPException
from werkzeug.formparser import parse_form_data

from mimesniff.config.logging import get_logger
from mimesniff.constants import DEFAULT_SOURCE_NAME
from mimesniff.source.errors import EmptyBodyError, FormParseError, MissingFileFieldError
from mimesniff.source.registry import register_source

if TYPE_CHECKING:
    from werkzeug.datastructures import FileStorage
    from werkzeug.wrappers import Request

    from mimesniff.config import Config
    from mimesniff.config.logging import MimesniffLogger

logger: MimesniffLogger = get_logger(__name__)


def is_form_body(request: Request) -> bool:
    """Return True if ``request`` carries a multipart body."""
    return request.mimetype.startswith("multipart/")


@register_source(DEFAULT_SOURCE_NAME)
class BodySource:
    """Payload source reading the request body (multipart file field or raw).

    Args:
        config (Config): Runtime configuration (methods, form field, memory limit).
    """

    name: str = DEFAULT_SOURCE_NAME

    def __init__(self, config: Config) -> None:
        self.config = config

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    def matches(self, request: Request) -> bool:
        """Return True if the request method is enabled for this source."""
        method: str = request.method.upper()
        return any(method == m.upper() for m in self.config.methods)

    def get_payload(self, request: Request) -> bytes:
        """Extract the request payload.

        Args:
            request (Request): The incoming request.

        Returns:
            bytes: The full payload (never empty).

        Raises:
            FormParseError: If the multipart form cannot be parsed.
            MissingFileFieldError: If the form has no file under ``form_field``.
            EmptyBodyError: If the extracted payload is empty.
        """
        buf: bytes = self._read_form_body(request) if is_form_body(request) else request.get_data()
        if not buf:
            raise EmptyBodyError()
        logger.debug("%s: extracted %d bytes", self.name, len(buf))
        return buf

    def _read_form_body(self, request: Request) -> bytes:
        # Request.files parses silently and hides malformed bodies; parse strictly.
        try:
            _, _, files = parse_form_data(
                request.environ,
                max_form_memory_size=self.config.max_memory,
                max_content_length=request.max_content_length,
                silent=False,
            )
        except (HTTPException, ValueError) as e:
            logger.warning("%s: cannot parse multipart form: %s", self.name, e)
            raise FormParseError(f"Cannot parse multipart form: {e}") from e

        storage: FileStorage | None = files.get(self.config.form_field)
        if storage is None:
            raise MissingFileFieldError(self.config.form_field)

        try:
            return storage.read()
        finally:
            storage.close()
