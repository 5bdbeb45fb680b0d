# topmark:header:start
#
#   project      : MimeSniff
#   file         : model.py
#   file_relpath : src/mimesniff/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by payload sources and the
      HTTP application.
    - `MutableConfig`: a mutable builder used while layering defaults, discovered
      config files and explicit overrides; it can be frozen into `Config` and
      thawed back for edits.

Layering (lowest to highest precedence):
    1. runtime defaults (`load_defaults_dict`)
    2. ``mimesniff.toml`` or ``[tool.mimesniff]`` in ``pyproject.toml`` found in
       the current working directory
    3. an explicit config file (``--config``)

Only keys that are present in a layer override the lower layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from mimesniff.config.io import (
    ConfigLoadError,
    get_int_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from mimesniff.config.keys import Toml
from mimesniff.config.logging import get_logger
from mimesniff.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_FORM_FIELD,
    DEFAULT_MAX_MEMORY,
    DEFAULT_METHODS,
    DEFAULT_SOURCE_NAME,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from mimesniff.config.io import TomlTable
    from mimesniff.config.logging import MimesniffLogger

logger: MimesniffLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for MimeSniff.

    Attributes:
        sources (tuple[str, ...]): Names of the payload sources to enable, in the
            order they are tried.
        methods (tuple[str, ...]): HTTP methods accepted by the ``payload`` source.
        form_field (str): Name of the multipart form field holding the upload.
        max_memory (int): Maximum in-memory size (bytes) of a parsed multipart form.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
    """

    sources: tuple[str, ...]
    methods: tuple[str, ...]
    form_field: str
    max_memory: int
    config_files: tuple[Path | str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            sources=list(self.sources),
            methods=list(self.methods),
            form_field=self.form_field,
            max_memory=self.max_memory,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this configuration into a TOML-serializable dict."""
        return {
            Toml.SECTION_SOURCE: {
                Toml.KEY_ENABLED: list(self.sources),
                Toml.KEY_METHODS: list(self.methods),
                Toml.KEY_FORM_FIELD: self.form_field,
                Toml.KEY_MAX_MEMORY: self.max_memory,
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields left as ``None`` are "not set" by this layer and are inherited from
    lower layers by `merge_with`; `freeze` fills any remaining gaps with the
    runtime defaults.
    """

    sources: list[str] | None = None
    methods: list[str] | None = None
    form_field: str | None = None
    max_memory: int | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Build a layer from a parsed TOML table.

        Args:
            data (TomlTable): Parsed ``mimesniff.toml`` content (or the
                ``[tool.mimesniff]`` table of a ``pyproject.toml``).
            config_file (Path | None): Origin of ``data``, recorded for provenance.

        Returns:
            MutableConfig: The layer; keys absent from ``data`` stay unset.
        """
        source_tbl: TomlTable = get_table_value(data, Toml.SECTION_SOURCE)
        methods: list[str] | None = get_string_list_or_none(source_tbl, Toml.KEY_METHODS)
        draft = cls(
            sources=get_string_list_or_none(source_tbl, Toml.KEY_ENABLED),
            methods=[m.upper() for m in methods] if methods is not None else None,
            form_field=get_string_value_or_none(source_tbl, Toml.KEY_FORM_FIELD),
            max_memory=get_int_value_or_none(source_tbl, Toml.KEY_MAX_MEMORY),
        )
        if config_file is not None:
            draft.config_files.append(config_file)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Build a layer from a ``mimesniff.toml`` or ``pyproject.toml`` file.

        For ``pyproject.toml`` only the ``[tool.mimesniff]`` table is used.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            tool: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
            data = get_table_value(tool, PYPROJECT_TOOL_SECTION)
        logger.debug("Loaded config layer from %s", path)
        return cls.from_toml_dict(data, config_file=path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of this layer (``other`` wins for set fields)."""
        return MutableConfig(
            sources=other.sources if other.sources is not None else self.sources,
            methods=other.methods if other.methods is not None else self.methods,
            form_field=other.form_field if other.form_field is not None else self.form_field,
            max_memory=other.max_memory if other.max_memory is not None else self.max_memory,
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Config:
        """Return an immutable `Config`; unset fields take their defaults."""
        return Config(
            sources=tuple(self.sources if self.sources is not None else (DEFAULT_SOURCE_NAME,)),
            methods=tuple(
                m.upper() for m in (self.methods if self.methods is not None else DEFAULT_METHODS)
            ),
            form_field=self.form_field if self.form_field is not None else DEFAULT_FORM_FIELD,
            max_memory=self.max_memory if self.max_memory is not None else DEFAULT_MAX_MEMORY,
            config_files=tuple(self.config_files),
        )


def discover_config_file(cwd: Path | None = None) -> Path | None:
    """Return the config file to use from ``cwd`` (default: the current directory).

    ``mimesniff.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` is only
    selected when it declares a ``[tool.mimesniff]`` table.
    """
    base: Path = cwd if cwd is not None else Path.cwd()
    candidate: Path = base / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = base / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        try:
            data: TomlTable = load_toml_dict(pyproject)
        except ConfigLoadError:
            return None
        tool: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
        if PYPROJECT_TOOL_SECTION in tool:
            return pyproject
    return None


def load_config(path: Path | None = None, *, discover: bool = True) -> Config:
    """Build the effective configuration.

    Args:
        path (Path | None): Explicit config file, applied last.
        discover (bool): Whether to look for a config file in the current directory.

    Returns:
        Config: The frozen, merged configuration.

    Raises:
        ConfigLoadError: If the explicit ``path`` cannot be loaded. Problems with a
            discovered file are logged and that layer is skipped.
    """
    draft: MutableConfig = MutableConfig.from_defaults()

    if discover:
        found: Path | None = discover_config_file()
        if found is not None and (path is None or found.resolve() != path.resolve()):
            try:
                draft = draft.merge_with(MutableConfig.from_toml_file(found))
            except ConfigLoadError as e:
                logger.warning("Ignoring discovered config %s: %s", found, e)

    if path is not None:
        draft = draft.merge_with(MutableConfig.from_toml_file(path))

    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
