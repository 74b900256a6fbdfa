# topmark:header:start
#
#   project      : WasmDocs
#   file         : __init__.py
#   file_relpath : src/wasmdocs/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Configuration handling for WasmDocs.

Configuration is layered: built-in defaults, then ``wasmdocs.toml`` (or
``[tool.wasmdocs]`` in ``pyproject.toml``) from the working directory, then an
explicit ``--config`` file, then CLI overrides. Layers are merged on
`wasmdocs.config.model.MutableDocsConfig` and frozen into an immutable
`wasmdocs.config.model.DocsConfig`.

Submodules are imported explicitly; this package does not re-export them, so
that `wasmdocs.config.logging` can be imported from any module without pulling
in the configuration model.
"""
