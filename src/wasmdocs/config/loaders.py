# topmark:header:start
#
#   project      : WasmDocs
#   file         : loaders.py
#   file_relpath : src/wasmdocs/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading WasmDocs configuration from:
- the built-in runtime defaults,
- on-disk TOML files (``wasmdocs.toml`` / ``[tool.wasmdocs]`` in ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from wasmdocs.config.keys import Toml
from wasmdocs.config.logging import get_logger
from wasmdocs.config.model import ConfigError, MutableDocsConfig
from wasmdocs.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BUILD_SCRIPT,
    DEFAULT_GENERATOR,
    DEFAULT_OPTIONS_DIR,
    DEFAULT_README,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_TABLE,
)
from wasmdocs.surfaces import DEFAULT_SURFACES

if TYPE_CHECKING:
    from pathlib import Path

    from wasmdocs.config.logging import WasmdocsLogger
    from wasmdocs.config.types import TomlTable

logger: WasmdocsLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return the WasmDocs **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_BUILD: {
            Toml.KEY_SCRIPT: DEFAULT_BUILD_SCRIPT,
            Toml.KEY_SKIP: False,
        },
        Toml.SECTION_GENERATOR: {
            Toml.KEY_EXECUTABLE: DEFAULT_GENERATOR,
            Toml.KEY_README: DEFAULT_README,
            Toml.KEY_OPTIONS: DEFAULT_OPTIONS_DIR,
            Toml.KEY_SOURCE_LINK_EXTERNAL: True,
        },
        Toml.SECTION_SURFACES: {
            surface.value: {
                Toml.KEY_NAME: spec.name,
                Toml.KEY_OUT: spec.out,
                Toml.KEY_ENTRY: spec.entry,
            }
            for surface, spec in DEFAULT_SURFACES.items()
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``wasmdocs.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data_any: Any = tomlkit.parse(text).unwrap()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.wasmdocs]`` table of a parsed ``pyproject.toml``, if any."""
    node: Any = data
    for key in PYPROJECT_TOOL_TABLE:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    if node is None:
        return None
    if not isinstance(node, dict):
        raise ConfigError("[tool.wasmdocs] must be a table")
    return cast("TomlTable", node)


def load_config_file(path: Path) -> MutableDocsConfig:
    """Load one configuration layer from ``path``.

    A file named ``pyproject.toml`` contributes its ``[tool.wasmdocs]`` table;
    any other file is read as a ``wasmdocs.toml`` document.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    resolved: Path = path.resolve()
    data: TomlTable = load_toml_dict(resolved)
    if resolved.name == PYPROJECT_FILE_NAME:
        table: TomlTable | None = extract_tool_table(data)
        if table is None:
            logger.info("No [tool.wasmdocs] table in %s", resolved)
            return MutableDocsConfig()
        data = table
    logger.info("Loaded configuration from %s", resolved)
    return MutableDocsConfig.from_toml_dict(data, config_file=resolved)


def discover_config_file(cwd: Path) -> Path | None:
    """Return the configuration file found in ``cwd``, if any.

    ``wasmdocs.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it carries a ``[tool.wasmdocs]`` table.
    """
    candidate: Path = cwd / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and extract_tool_table(load_toml_dict(pyproject)) is not None:
        return pyproject
    logger.debug("No configuration file discovered in %s", cwd)
    return None


def resolve_config(*, cwd: Path, config_path: Path | None = None) -> MutableDocsConfig:
    """Merge defaults, the discovered file and an explicit file into one layer.

    Args:
        cwd (Path): Directory searched for a configuration file.
        config_path (Path | None): Explicit configuration file (``--config``).

    Returns:
        MutableDocsConfig: The merged layer; CLI overrides are merged on top by
            the caller before freezing.

    Raises:
        ConfigError: If any contributing file cannot be read or is invalid.
    """
    merged: MutableDocsConfig = MutableDocsConfig.from_toml_dict(load_defaults_dict())

    discovered: Path | None = discover_config_file(cwd)
    if discovered is not None and (
        config_path is None or discovered.resolve() != config_path.resolve()
    ):
        merged = merged.merge_with(load_config_file(discovered))

    if config_path is not None:
        merged = merged.merge_with(load_config_file(config_path))

    logger.debug("Configuration files: %s", merged.config_files)
    return merged
