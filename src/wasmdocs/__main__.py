# topmark:header:start
#
#   project      : WasmDocs
#   file         : __main__.py
#   file_relpath : src/wasmdocs/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Module entry point for running WasmDocs via ``python -m wasmdocs``.

Equivalent to running the ``wasmdocs`` console script; it delegates to
:func:`wasmdocs.cli.main.cli`.

Examples:
    Build only the RPC reference::

        python -m wasmdocs --rpc
"""

from __future__ import annotations

from wasmdocs.cli.main import cli

if __name__ == "__main__":
    cli()
