# topmark:header:start
#
#   project      : WasmDocs
#   file         : __init__.py
#   file_relpath : src/wasmdocs/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""WasmDocs CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    wasmdocs = "wasmdocs.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main at module import time
