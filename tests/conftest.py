# topmark:header:start
#
#   project      : MimeSniff
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the MimeSniff test suite.

Sets up TRACE-level logging for the run and keeps a developer's exported
``MIMESNIFF_LOG_LEVEL`` from leaking into tests.

Notes:
    Build configs with `mimesniff.config.MutableConfig`, then `freeze()` them
    into a `mimesniff.config.Config`; never mutate a frozen `Config`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from mimesniff.config import MutableConfig, logging
from mimesniff.config.logging import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from mimesniff.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_mimesniff_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory (no config discovery)."""
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and keyword overrides."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
