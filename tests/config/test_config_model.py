# topmark:header:start
#
#   project      : MimeSniff
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model, layering and discovery."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from mimesniff.config import (
    Config,
    ConfigLoadError,
    MutableConfig,
    discover_config_file,
    load_config,
)
from mimesniff.config.io import get_int_value_or_none, get_string_list_or_none, to_toml
from mimesniff.constants import DEFAULT_MAX_MEMORY

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()
    assert config.sources == ("payload",)
    assert config.methods == ("POST",)
    assert config.form_field == "file"
    assert config.max_memory == DEFAULT_MAX_MEMORY == 32 * 1024 * 1024
    assert config.config_files == ("<defaults>",)


def test_config_is_frozen_and_thaws() -> None:
    config = MutableConfig.from_defaults().freeze()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.form_field = "x"  # type: ignore[misc]
    draft = config.thaw()
    draft.form_field = "upload"
    assert draft.freeze().form_field == "upload"
    assert config.form_field == "file"


def test_from_toml_dict_normalizes_methods() -> None:
    draft = MutableConfig.from_toml_dict({"source": {"methods": ["post", "Put"]}})
    assert draft.methods == ["POST", "PUT"]
    assert draft.sources is None
    assert draft.form_field is None


def test_merge_later_layer_wins_for_set_fields() -> None:
    base = MutableConfig.from_defaults()
    layer = MutableConfig.from_toml_dict({"source": {"form_field": "upload"}})
    merged = base.merge_with(layer).freeze()
    assert merged.form_field == "upload"
    assert merged.methods == ("POST",)


def test_wrong_shapes_keep_defaults() -> None:
    data: dict[str, Any] = {
        "source": {"methods": "POST", "max_memory": -1, "form_field": 3, "enabled": [1]}
    }
    config = MutableConfig.from_defaults().merge_with(MutableConfig.from_toml_dict(data)).freeze()
    assert config == MutableConfig.from_defaults().freeze()


def test_int_getter_rejects_bool() -> None:
    assert get_int_value_or_none({"n": True}, "n") is None
    assert get_int_value_or_none({"n": 7}, "n") == 7
    assert get_string_list_or_none({"l": ["a", "b"]}, "l") == ["a", "b"]


def test_to_toml_roundtrips_through_tomlkit() -> None:
    config = MutableConfig.from_defaults().freeze()
    parsed: Any = tomlkit.parse(to_toml(config.to_toml_dict())).unwrap()
    assert MutableConfig.from_toml_dict(parsed).freeze().methods == config.methods
    assert parsed["source"]["max_memory"] == config.max_memory


def test_discover_prefers_mimesniff_toml(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text("[tool.mimesniff.source]\nform_field = 'a'\n")
    (isolation / "mimesniff.toml").write_text("[source]\nform_field = 'b'\n")
    found = discover_config_file()
    assert found is not None
    assert found.name == "mimesniff.toml"
    assert load_config().form_field == "b"


def test_discover_pyproject_needs_tool_table(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text("[project]\nname = 'x'\n")
    assert discover_config_file() is None

    (isolation / "pyproject.toml").write_text(
        "[tool.mimesniff.source]\nmethods = ['put']\nmax_memory = 1024\n"
    )
    config = load_config()
    assert config.methods == ("PUT",)
    assert config.max_memory == 1024
    assert str(config.config_files[-1]).endswith("pyproject.toml")


def test_explicit_file_overrides_discovered(isolation: Path, tmp_path: Path) -> None:
    (isolation / "mimesniff.toml").write_text("[source]\nform_field = 'b'\nmethods = ['PUT']\n")
    explicit = tmp_path / "custom.toml"
    explicit.write_text("[source]\nform_field = 'c'\n")
    config = load_config(explicit)
    assert config.form_field == "c"
    assert config.methods == ("PUT",)


def test_invalid_discovered_file_is_skipped(isolation: Path) -> None:
    (isolation / "mimesniff.toml").write_text("[source\n")
    assert load_config() == MutableConfig.from_defaults().freeze()


def test_invalid_explicit_file_raises(tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("not = [valid\n")
    with pytest.raises(ConfigLoadError):
        load_config(bad, discover=False)
    with pytest.raises(ConfigLoadError):
        load_config(tmp_path / "missing.toml", discover=False)


def test_freeze_upper_cases_methods() -> None:
    assert MutableConfig(methods=["put", "Patch"]).freeze().methods == ("PUT", "PATCH")
