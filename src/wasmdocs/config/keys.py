# topmark:header:start
#
#   project      : WasmDocs
#   file         : keys.py
#   file_relpath : src/wasmdocs/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Canonical TOML section and key names for WasmDocs configuration.

These constants are the external configuration schema as it appears in
``wasmdocs.toml`` and in ``[tool.wasmdocs]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by WasmDocs configuration."""

    # Root
    KEY_ROOT: Final[str] = "root"

    # [build]
    SECTION_BUILD: Final[str] = "build"

    KEY_SCRIPT: Final[str] = "script"
    KEY_SKIP: Final[str] = "skip"

    # [generator]
    SECTION_GENERATOR: Final[str] = "generator"

    KEY_EXECUTABLE: Final[str] = "executable"
    KEY_README: Final[str] = "readme"
    KEY_OPTIONS: Final[str] = "options"
    KEY_SOURCE_LINK_EXTERNAL: Final[str] = "source_link_external"

    # [surfaces.<surface>]
    SECTION_SURFACES: Final[str] = "surfaces"

    KEY_NAME: Final[str] = "name"
    KEY_OUT: Final[str] = "out"
    KEY_ENTRY: Final[str] = "entry"

    # Keys allowed in each section, used to warn about unknown keys.
    ROOT_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_ROOT, SECTION_BUILD, SECTION_GENERATOR, SECTION_SURFACES}
    )
    BUILD_KEYS: Final[frozenset[str]] = frozenset({KEY_SCRIPT, KEY_SKIP})
    GENERATOR_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_EXECUTABLE, KEY_README, KEY_OPTIONS, KEY_SOURCE_LINK_EXTERNAL}
    )
    SURFACE_KEYS: Final[frozenset[str]] = frozenset({KEY_NAME, KEY_OUT, KEY_ENTRY})
