# topmark:header:start
#
#   project      : WasmDocs
#   file         : __init__.py
#   file_relpath : src/wasmdocs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""WasmDocs package.

WasmDocs builds the API reference of the WASM32 SDK. It runs the upstream
web build, then drives the documentation generator once per documentation
surface (Key Generation, RPC, Core and the combined SDK).
"""

from __future__ import annotations
