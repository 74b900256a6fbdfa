# topmark:header:start
#
#   project      : WasmDocs
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Configuration file loading and discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from wasmdocs.config.loaders import (
    discover_config_file,
    load_config_file,
    load_defaults_dict,
    load_toml_dict,
    resolve_config,
)
from wasmdocs.config.model import ConfigError, MutableDocsConfig
from wasmdocs.surfaces import DEFAULT_SURFACES, Surface


def test_defaults_dict_matches_runtime_defaults() -> None:
    from_dict = MutableDocsConfig.from_toml_dict(load_defaults_dict()).freeze()

    assert from_dict == MutableDocsConfig().freeze()
    assert dict(from_dict.surfaces) == dict(DEFAULT_SURFACES)


def test_defaults_dict_is_a_fresh_copy() -> None:
    first = load_defaults_dict()
    first["generator"]["executable"] = "changed"

    assert load_defaults_dict()["generator"]["executable"] == "typedoc"


def test_load_wasmdocs_toml(isolation: Path) -> None:
    path = isolation / "wasmdocs.toml"
    path.write_text(
        '[generator]\nexecutable = "npx-typedoc"\n\n[surfaces.sdk]\nout = "public/sdk"\n',
        encoding="utf-8",
    )

    config = load_config_file(path).freeze()

    assert config.generator == "npx-typedoc"
    assert config.surface(Surface.SDK).out == "public/sdk"
    assert config.config_files == (path.resolve(),)


def test_load_pyproject_uses_tool_table(isolation: Path) -> None:
    path = isolation / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.wasmdocs.build]\nskip = true\n',
        encoding="utf-8",
    )

    assert load_config_file(path).freeze().skip_build is True


def test_pyproject_without_tool_table_is_empty_layer(isolation: Path) -> None:
    path = isolation / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert load_config_file(path) == MutableDocsConfig()


def test_invalid_toml_raises_config_error(isolation: Path) -> None:
    path = isolation / "wasmdocs.toml"
    path.write_text("[generator\nexecutable = ", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_unreadable_file_raises_config_error(isolation: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(isolation / "missing.toml")


def test_non_utf8_file_raises_config_error(isolation: Path) -> None:
    path = isolation / "wasmdocs.toml"
    path.write_bytes(b"\xff\xfe[generator]\n")

    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(path)


def test_duplicate_key_raises_config_error(isolation: Path) -> None:
    path = isolation / "wasmdocs.toml"
    path.write_text('[generator]\nreadme = "A.md"\nreadme = "B.md"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_discovery_prefers_wasmdocs_toml(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text("[tool.wasmdocs]\n", encoding="utf-8")
    (isolation / "wasmdocs.toml").write_text("", encoding="utf-8")

    assert discover_config_file(isolation) == isolation / "wasmdocs.toml"


def test_discovery_ignores_pyproject_without_tool_table(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert discover_config_file(isolation) is None


def test_explicit_config_overrides_discovered(isolation: Path, tmp_path: Path) -> None:
    (isolation / "wasmdocs.toml").write_text(
        '[generator]\nexecutable = "local"\nreadme = "LOCAL.md"\n', encoding="utf-8"
    )
    explicit = tmp_path / "ci.toml"
    explicit.write_text('[generator]\nexecutable = "ci"\n', encoding="utf-8")

    config = resolve_config(cwd=isolation, config_path=explicit).freeze()

    assert config.generator == "ci"
    assert config.readme == "LOCAL.md"
    assert config.config_files == ((isolation / "wasmdocs.toml").resolve(), explicit.resolve())


def test_explicit_config_equal_to_discovered_is_loaded_once(isolation: Path) -> None:
    path = isolation / "wasmdocs.toml"
    path.write_text("", encoding="utf-8")

    config = resolve_config(cwd=isolation, config_path=path).freeze()

    assert config.config_files == (path.resolve(),)
