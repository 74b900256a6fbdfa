# topmark:header:start
#
#   project      : WasmDocs
#   file         : types.py
#   file_relpath : src/wasmdocs/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Type aliases shared by the configuration layer."""

from __future__ import annotations

from typing import Any, TypeAlias

TomlValue: TypeAlias = Any
TomlTable: TypeAlias = dict[str, TomlValue]
