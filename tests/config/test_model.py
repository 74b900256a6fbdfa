# topmark:header:start
#
#   project      : WasmDocs
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Configuration layers: parsing, merging and freezing."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wasmdocs.config.model import ConfigError, MutableDocsConfig
from wasmdocs.surfaces import DEFAULT_SURFACES, Surface


def test_empty_layer_freezes_to_defaults() -> None:
    config = MutableDocsConfig().freeze()

    assert config.root == Path.cwd()
    assert config.build_script == "./build-web"
    assert config.skip_build is False
    assert config.generator == "typedoc"
    assert config.readme == "README.md"
    assert config.options == "build/docs/"
    assert config.source_link_external is True
    assert dict(config.surfaces) == dict(DEFAULT_SURFACES)
    assert config.config_files == ()


def test_later_layer_wins_and_unset_fields_fall_through() -> None:
    base = MutableDocsConfig(generator="typedoc-a", readme="A.md")
    top = MutableDocsConfig(generator="typedoc-b")

    merged = base.merge_with(top).freeze()

    assert merged.generator == "typedoc-b"
    assert merged.readme == "A.md"


def test_surface_overrides_merge_per_key() -> None:
    base = MutableDocsConfig(surfaces={Surface.RPC: {"name": "RPC docs", "out": "out/a"}})
    top = MutableDocsConfig(surfaces={Surface.RPC: {"out": "out/b"}})

    rpc = base.merge_with(top).freeze().surface(Surface.RPC)

    assert rpc.name == "RPC docs"
    assert rpc.out == "out/b"
    assert rpc.entry == "build/docs/kaspa-rpc.ts"


def test_merge_does_not_mutate_inputs() -> None:
    base = MutableDocsConfig(surfaces={Surface.SDK: {"out": "a"}})
    top = MutableDocsConfig(surfaces={Surface.SDK: {"out": "b"}})

    base.merge_with(top)

    assert base.surfaces[Surface.SDK] == {"out": "a"}


def test_thaw_then_freeze_preserves_values() -> None:
    config = MutableDocsConfig(generator="x", skip_build=True).freeze()

    assert config.thaw().freeze() == config


def test_empty_surface_value_is_rejected() -> None:
    layer = MutableDocsConfig(surfaces={Surface.CORE: {"out": ""}})

    with pytest.raises(ConfigError, match=r"surfaces\.core"):
        layer.freeze()


def test_from_toml_dict_reads_every_section(tmp_path: Path) -> None:
    source = tmp_path / "wasmdocs.toml"
    data = {
        "root": "wasm",
        "build": {"script": "./build-release", "skip": True},
        "generator": {
            "executable": "npx",
            "readme": "DOCS.md",
            "options": "docs-opts/",
            "source_link_external": False,
        },
        "surfaces": {"keygen": {"name": "Keys"}},
    }

    config = MutableDocsConfig.from_toml_dict(data, config_file=source).freeze()

    assert config.root == tmp_path / "wasm"
    assert config.build_script == "./build-release"
    assert config.skip_build is True
    assert config.generator == "npx"
    assert config.readme == "DOCS.md"
    assert config.options == "docs-opts/"
    assert config.source_link_external is False
    assert config.surface(Surface.KEYGEN).name == "Keys"
    assert config.config_files == (source,)


@pytest.mark.parametrize(
    "data",
    [
        {"root": 1},
        {"build": "nope"},
        {"build": {"skip": "yes"}},
        {"generator": {"executable": ["typedoc"]}},
        {"surfaces": {"rpc": "docs"}},
        {"surfaces": {"rpc": {"out": 3}}},
    ],
)
def test_wrong_types_raise_config_error(data: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        MutableDocsConfig.from_toml_dict(data)


def test_unknown_keys_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    data = {
        "colour": True,
        "generator": {"theme": "dark"},
        "surfaces": {"wallet": {"out": "docs/wallet"}, "rpc": {"title": "x"}},
    }

    with caplog.at_level(logging.WARNING):
        layer = MutableDocsConfig.from_toml_dict(data)

    assert layer.surfaces == {}
    messages = caplog.text
    assert "colour" in messages
    assert "[generator] theme" in messages
    assert "surfaces.wallet" in messages
    assert "[surfaces.rpc] title" in messages
