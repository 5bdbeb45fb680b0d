# topmark:header:start
#
#   project      : MimeSniff
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff project automation via Nox.

Sessions:
  - `lint`: Ruff lint and format check.
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `package_check`: Build sdist/wheel.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import tomllib
import warnings
from typing import Any, cast

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from the `pyproject.toml` classifiers.

    Returns:
        list[str]: Versions like ["3.11", "3.12"], sorted; the running
            interpreter's version if none can be found.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    try:
        doc: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        doc = {}

    classifiers_any = cast("dict[str, Any]", doc.get("project") or {}).get("classifiers")
    if not isinstance(classifiers_any, list):
        warnings.warn(
            "Could not find 'classifiers' in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    versions: list[str] = []
    for c in cast("list[str]", classifiers_any):
        if not c.startswith(prefix):
            continue
        v: str = c.removeprefix(prefix).strip()
        parts: list[str] = v.split(".")
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            versions.append(v)
    return sorted(set(versions), key=lambda s: tuple(int(p) for p in s.split("."))) or [
        CURRENT_PYTHON_VERSION
    ]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "qa"]


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis with Ruff."""
    session.install("ruff")
    session.run("ruff", "check", ".")
    session.run("ruff", "format", "--check", ".")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install("-e", ".[test]", "pyright")

    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session(python=CURRENT_PYTHON_VERSION)
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist and wheel into ``dist/``."""
    session.install("build")
    session.run("python", "-m", "build")
