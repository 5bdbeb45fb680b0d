# topmark:header:start
#
#   project      : MimeSniff
#   file         : registry.py
#   file_relpath : src/mimesniff/source/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of named payload sources.

Sources register a factory under a unique name with the `register_source`
decorator. The application then instantiates the sources enabled in its
`Config` (`build_sources`) and, per request, picks the first one whose
``matches`` accepts the request (`match_source`).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, TypeVar

from mimesniff.config.logging import get_logger
from mimesniff.source.errors import SourceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from werkzeug.wrappers import Request

    from mimesniff.config import Config
    from mimesniff.config.logging import MimesniffLogger
    from mimesniff.source.base import PayloadSource, SourceFactory

logger: MimesniffLogger = get_logger(__name__)

F = TypeVar("F", bound="SourceFactory")

_registry: dict[str, SourceFactory] = {}


def register_source(name: str) -> Callable[[F], F]:
    """Decorator registering a payload source factory under ``name``.

    The decorated object (typically a class taking a `Config`) is stored
    unchanged and returned as-is.

    Args:
        name (str): Unique registry name of the source.

    Returns:
        Callable[[F], F]: A decorator that registers the factory.

    Raises:
        ValueError: If ``name`` is empty.
    """
    if not name:
        raise ValueError("Source name must not be empty")

    def decorator(factory: F) -> F:
        """Register ``factory`` under the enclosing ``name``.

        Raises:
            ValueError: If a source is already registered under ``name``.
        """
        if name in _registry:
            raise ValueError(f"Payload source '{name}' is already registered.")
        logger.debug("Registering payload source %r (%s)", name, factory)
        _registry[name] = factory
        return factory

    return decorator


def unregister_source(name: str) -> None:
    """Remove the source registered under ``name``.

    Raises:
        SourceNotFoundError: If nothing is registered under ``name``.
    """
    if name not in _registry:
        raise SourceNotFoundError(name)
    del _registry[name]


def get_source_registry() -> Mapping[str, SourceFactory]:
    """Return a read-only view of the registered source factories (registration order)."""
    return MappingProxyType(_registry)


def build_sources(config: Config) -> list[PayloadSource]:
    """Instantiate the sources enabled in ``config.sources``, in that order.

    Raises:
        SourceNotFoundError: If an enabled name is not registered.
    """
    sources: list[PayloadSource] = []
    for name in config.sources:
        factory: SourceFactory | None = _registry.get(name)
        if factory is None:
            raise SourceNotFoundError(name)
        sources.append(factory(config))
    return sources


def match_source(sources: Iterable[PayloadSource], request: Request) -> PayloadSource | None:
    """Return the first source that accepts ``request`` (None if none does)."""
    for source in sources:
        if source.matches(request):
            logger.debug("%s %s: handled by source %r", request.method, request.path, source.name)
            return source
    logger.debug("%s %s: no matching source", request.method, request.path)
    return None
